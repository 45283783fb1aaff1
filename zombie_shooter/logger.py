"""Markdown logger for gameplay events (shots, kills, level-ups, boss fights)."""

import datetime

class GameLogger:
    """Handles logging of game events to markdown file."""

    def __init__(self, log_file: str):
        """
        Initialize the game logger.

        Parameters
        ----------
        log_file : str
            Path to the log file
        """
        self.log_file = log_file
        self.setup_log()

    def setup_log(self) -> None:
        """Initialize the log file with headers."""
        try:
            with open(self.log_file, 'w', encoding='utf-8') as f:
                f.write("# Zombie Shooter Game Log\n\n")
                f.write(f"Log started at: {datetime.datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n\n")
                f.write("## Game Events\n\n")
                f.write("| Timestamp | Event | Details |\n")
                f.write("|-----------|-------|---------|\n")
        except Exception as e:
            print(f"Failed to initialize log file: {e}")

    def log_event(self, kind: str, details: str = "") -> None:
        """
        Append one event row.

        Parameters
        ----------
        kind : str
            Event name, written upper-cased with spaces (``level_up`` -> ``LEVEL UP``)
        details : str, optional
            Additional details about the event
        """
        try:
            timestamp = datetime.datetime.now().strftime('%H:%M:%S.%f')[:-3]  # Include milliseconds
            label = kind.replace("_", " ").upper()

            with open(self.log_file, 'a', encoding='utf-8') as f:
                f.write(f"| {timestamp} | {label} | {details} |\n")

        except Exception as e:
            print(f"Failed to log {kind}: {e}")

    def log_session_start(self, field_size: tuple[int, int]) -> None:
        self.log_event("session_start", f"Field {field_size[0]}x{field_size[1]}")

