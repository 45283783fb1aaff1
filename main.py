"""Game entry point"""

from __future__ import annotations

import pygame

from zombie_shooter.constants import *
from zombie_shooter.ads import AdManager
from zombie_shooter.audio import SoundEffect
from zombie_shooter.controls import Controls
from zombie_shooter.logger import GameLogger
from zombie_shooter.models import GameEvent
from zombie_shooter.renderer import Renderer
from zombie_shooter.world import World
from ui import HUD, Button, GameOverScreen

class Game:
    """
    Main game controller: initializes subsystems, runs the loop, routes input,
    steps the world, reacts to its events and draws the frame.
    """

    def __init__(self) -> None:
        """Initialize subsystems, load assets, and set initial game state."""
        pygame.init()
        pygame.display.set_caption("Zombie Shooter")

        self.ads = AdManager()
        # The banner gets its own strip below the playfield
        self.banner_height = AD_BANNER_HEIGHT if self.ads.enabled else 0
        self.screen = pygame.display.set_mode((WIDTH, HEIGHT + self.banner_height))
        self.clock = pygame.time.Clock()
        self.font_small = pygame.font.Font(FONT_NAME, FONT_SIZE_MEDIUM)
        self.font_big = pygame.font.Font(FONT_NAME, FONT_SIZE_LARGE)
        self.font_tiny = pygame.font.Font(FONT_NAME, FONT_SIZE_SMALL)
        self.current_width = WIDTH
        self.current_height = HEIGHT + self.banner_height
        self.fullscreen = False

        self.world = World(WIDTH, HEIGHT)
        # Touch positions are normalized to the whole window; the field shares its origin
        self.controls = Controls(self.current_width, self.current_height)
        self.renderer = Renderer(self.world)
        self.logger = GameLogger(LOG_FILE)
        self.audio = SoundEffect()
        self.ads.show_banner()

        self.hud = HUD(self.font_small)
        self.game_over_screen = GameOverScreen(self.font_big, self.font_small)
        self.start_button = Button("START GAME")
        self.fullscreen_button = Button("[ ]", size=(36, 36))

        self.paused = False
        # Pause-aware timing
        self.total_pause_time = 0       # Cumulative time spent paused (in ms)
        self.pause_start_time = None    # When current pause started (None if not paused)

    def get_game_time(self) -> int:
        """
        Get the current game time in milliseconds, excluding time spent paused.

        Returns
        -------
        int
            Current game time in milliseconds (wall time minus total pause time)
        """
        wall_time = pygame.time.get_ticks()

        # The running pause is added to total_pause_time on unpause
        if self.paused and self.pause_start_time is not None:
            current_pause_duration = wall_time - self.pause_start_time
            return wall_time - self.total_pause_time - current_pause_duration
        return wall_time - self.total_pause_time

    # --------------------------------- Setup ----------------------------------------

    def toggle_fullscreen(self) -> None:
        """Switch between the desktop-sized fullscreen field and the default window."""
        if not self.fullscreen:
            try:
                size = pygame.display.get_desktop_sizes()[0]
                self.screen = pygame.display.set_mode(size, pygame.FULLSCREEN)
                self.fullscreen = True
            except Exception as e:
                print(f"Failed to enter fullscreen: {e}")
                return
        else:
            self.screen = pygame.display.set_mode((WIDTH, HEIGHT + self.banner_height))
            self.fullscreen = False
        self.handle_resize(*self.screen.get_size())

    def handle_resize(self, new_width: int, new_height: int) -> None:
        """Make the world and input follow the current surface size."""
        self.current_width = new_width
        self.current_height = new_height
        self.world.resize(new_width, new_height - self.banner_height)
        self.controls.set_field_size(new_width, new_height)
        self.screen.fill(BG_COLOR)
        print(f"Field resized to {new_width}x{new_height}")

    def start_game(self) -> None:
        """Begin a new session from the start menu or the retry screen."""
        self.world.reset()
        self.controls.reset()
        self.renderer.kill_effects.clear()
        self.paused = False
        self.pause_start_time = None
        self.audio.playBackgroundMusic()
        self.logger.log_session_start((self.world.field_width, self.world.field_height))
        if AUTO_FULLSCREEN and not self.fullscreen:
            self.toggle_fullscreen()

    # --------------------------------- Loop -----------------------------------------

    @staticmethod
    def pointer_pos(event: pygame.event.Event, size: tuple[int, int]) -> tuple[float, float] | None:
        """Screen position of a click or tap, or None for other events."""
        if event.type == pygame.FINGERDOWN:
            return event.x * size[0], event.y * size[1]
        # SDL also emits emulated mouse events for touches; the finger event already covers them
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1 and not getattr(event, "touch", False):
            return event.pos
        return None

    def show_start_screen(self) -> bool:
        """
        Display the start screen with the start button and instructions.

        Returns
        -------
        bool
            True if user wants to start game, False if quit
        """
        while True:
            size = self.screen.get_size()
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return False
                if event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        return False
                    if event.key in (pygame.K_SPACE, pygame.K_RETURN):
                        return True
                    if event.key == pygame.K_F11:
                        self.toggle_fullscreen()
                    if event.key == pygame.K_m:
                        self.audio.toggleMute()
                pos = self.pointer_pos(event, size)
                if pos is not None:
                    if self.ads.handle_click(pos, size):
                        continue
                    if self.fullscreen_button.hit(pos):
                        self.toggle_fullscreen()
                    elif self.start_button.hit(pos):
                        return True

            self.draw_start_screen(pygame.mouse.get_pos())
            self.clock.tick(FPS)

    def draw_start_screen(self, mouse_pos: tuple[int, int]) -> None:
        """Draw the start screen."""
        self.screen.fill(BG_COLOR)

        title_text = self.font_big.render("ZOMBIE SHOOTER", True, (255, 255, 100))
        title_rect = title_text.get_rect(center=(self.current_width // 2, self.current_height // 2 - 140))
        self.screen.blit(title_text, title_rect)

        self.start_button.place((self.current_width // 2, self.current_height // 2))
        self.start_button.draw(self.screen, self.font_small, self.start_button.hit(mouse_pos))

        instructions = [
            "CONTROLS:",
            "Arrows - Move",
            "G - Shoot",
            "Touch - Drag to move, tap to shoot",
            "P - Pause | M - Mute",
            "F11 - Fullscreen | ESC - Quit",
        ]

        y_start = self.current_height // 2 + 60
        for i, instruction in enumerate(instructions):
            color = (255, 255, 100) if i == 0 else (180, 180, 180)
            text = self.font_tiny.render(instruction, True, color)
            text_rect = text.get_rect(center=(self.current_width // 2, y_start + i * 22))
            self.screen.blit(text, text_rect)

        self.draw_fullscreen_button()
        self.ads.draw(self.screen)
        pygame.display.flip()

    def run(self) -> None:
        """Main game entry point: show start screen then run game loop."""
        if not self.show_start_screen():
            pygame.quit()
            return
        self.start_game()
        self.run_game_loop()

    def run_game_loop(self) -> None:
        """Main game loop: process events, update, render; exits on quit request."""
        running = True
        while running:
            running = self.handle_events()

            game_time = self.get_game_time()
            if not self.paused and self.world.running:
                for event in self.world.step(self.controls, game_time):
                    self.on_world_event(event)

            self.ads.update(pygame.time.get_ticks())
            self.renderer.update_kill_effects()
            self.draw(game_time)

            # Cap frame rate
            self.clock.tick(FPS)

        pygame.quit()

    # --------------------------------- Input ----------------------------------------

    def handle_events(self) -> bool:
        """
        Route this frame's events to system controls, buttons, ads and Controls.

        Returns
        -------
        bool
            False once the player asked to quit
        """
        size = self.screen.get_size()
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    return False
                if event.key == pygame.K_F11:
                    self.toggle_fullscreen()
                    continue
                if event.key == pygame.K_m:
                    self.audio.toggleMute()
                    continue
                if event.key == pygame.K_p:
                    self.toggle_pause()
                    continue
                if event.key == pygame.K_b:
                    self.renderer.show_hitboxes = not self.renderer.show_hitboxes
                    continue
                if event.key == pygame.K_r and self.world.game_over:
                    self.start_game()
                    continue

            pos = self.pointer_pos(event, size)
            if pos is not None:
                if self.ads.handle_click(pos, size):
                    continue
                if self.fullscreen_button.hit(pos):
                    self.toggle_fullscreen()
                    continue
                if self.world.game_over:
                    if self.game_over_screen.retry_button.hit(pos):
                        self.start_game()
                    continue

            if not self.paused:
                self.controls.handle_event(event)
        return True

    def toggle_pause(self) -> None:
        if self.world.game_over:
            return
        if self.paused:
            if self.pause_start_time is not None:
                self.total_pause_time += pygame.time.get_ticks() - self.pause_start_time
                self.pause_start_time = None
            self.paused = False
        else:
            self.pause_start_time = pygame.time.get_ticks()
            self.paused = True
            # Keys released while paused would otherwise stay held
            self.controls.release()

    def on_world_event(self, event: GameEvent) -> None:
        """Turn a world event into sound, effects and a log row."""
        if event.kind == "shot":
            self.audio.playAttackSound()
        elif event.kind == "zombie_killed":
            self.audio.playZombieDeathSound()
            if event.pos is not None:
                self.renderer.create_kill_effect(event.pos)
        elif event.kind == "game_over":
            self.audio.stopBackgroundMusic()
            self.audio.playGameOverSound()
            self.ads.show_interstitial(pygame.time.get_ticks())
        self.logger.log_event(event.kind, event.detail)

    # --------------------------------- Rendering ------------------------------------

    def draw_fullscreen_button(self) -> None:
        self.fullscreen_button.place((self.current_width - 28, self.current_height - self.banner_height - 28))
        self.fullscreen_button.draw(self.screen, self.font_tiny)

    def draw(self, now_ms: int) -> None:
        """
        Compose the frame: playfield → HUD → game over → fullscreen button → ads.
        """
        self.renderer.draw(self.screen, now_ms)
        self.hud.draw(self.screen, self.world.score, self.world.level, self.world.player.health,
                      self.paused, self.audio.muted)
        if self.world.game_over:
            self.game_over_screen.draw(self.screen, self.world.score, pygame.mouse.get_pos())
        self.draw_fullscreen_button()
        self.ads.draw(self.screen)
        pygame.display.flip()


def main() -> None:
    Game().run()


if __name__ == "__main__":
    main()
