"""Game-wide constants for Zombie Shooter.

Field dimensions, colors, font sizes, entity tuning for the player, zombies,
bullets and the boss, level progression, asset paths, ad hooks and logging
configuration.
"""
import os

WIDTH, HEIGHT = 360, 640           # portrait playfield
FPS = 60                           # target frame rate
BG_COLOR = (0, 0, 0)
TEXT_COLOR = (255, 255, 255)
HUD_PADDING = 10
FONT_NAME = "freesansbold.ttf"

# Font Size Constants
FONT_SIZE_SMALL = 14
FONT_SIZE_MEDIUM = 20
FONT_SIZE_LARGE = 32

# Fallback colors when sprites are missing
PLAYER_COLOR = (0, 0, 255)
ZOMBIE_COLOR = (0, 128, 0)
BULLET_COLOR = (255, 0, 0)
BOSS_COLOR = (128, 0, 128)
FLASH_COLOR = (255, 235, 90)
KILL_SPARK_COLOR = (255, 255, 100)

# Player
PLAYER_START_X = 160
PLAYER_START_Y = 580
PLAYER_WIDTH = 70
PLAYER_HEIGHT = 70
PLAYER_SPEED = 5
PLAYER_HEALTH = 100

# Zombies
ZOMBIE_WIDTH = 100
ZOMBIE_HEIGHT = 100
ZOMBIES_PER_LEVEL = 5              # wave size = level * ZOMBIES_PER_LEVEL
ZOMBIE_BASE_SPEED = 1.0
ZOMBIE_SPEED_PER_LEVEL = 0.2
ZOMBIE_BASE_HEALTH = 20
ZOMBIE_HEALTH_PER_LEVEL = 5
ZOMBIE_SPAWN_DEPTH = 100           # zombies enter from y in (-depth, 0]
ZOMBIE_CONTACT_DAMAGE = 10         # per frame of overlap
ZOMBIE_KILL_SCORE = 10
ZOMBIE_HIT_FLASH_MS = 120

# Bullets
BULLET_WIDTH = 40
BULLET_HEIGHT = 40
BULLET_SPEED = 7
BULLET_OFFSET_X = 5                # spawn x = player center - offset
BULLET_ZOMBIE_DAMAGE = 20
BULLET_BOSS_DAMAGE = 10
SHOOT_DELAY_MS = 300               # minimum gap between shots

# Boss
BOSS_WIDTH = 200
BOSS_HEIGHT = 200
BOSS_START_Y = 50
BOSS_HEALTH = 500
BOSS_SPEED = 2
BOSS_CONTACT_DAMAGE = 20           # per frame of overlap

# Level System Settings
START_LEVEL = 1
MAX_LEVEL = 10                     # levels past this bring a boss

# Display
AUTO_FULLSCREEN = False            # enter fullscreen when a game starts

# Ads
ADS_ENABLED = True
AD_BANNER_HEIGHT = 60
AD_BANNER_COLOR = (255, 255, 255, 204)
AD_INTERSTITIAL_COLOR = (0, 0, 0, 204)
AD_INTERSTITIAL_MS = 3000          # auto-close delay
AD_URL = "https://advertiser.com"

# Log file settings
LOG_FILE = os.path.join(os.path.dirname(os.path.dirname(__file__)), "log.md")
ASSETS_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), "assets")
PLAYER_IMAGE_PATH = os.path.join(ASSETS_DIR, "hero.png")
ZOMBIE_IMAGE_PATH = os.path.join(ASSETS_DIR, "zombie.png")
BULLET_IMAGE_PATH = os.path.join(ASSETS_DIR, "bullet.png")
MUSIC_PATH = os.path.join(ASSETS_DIR, "bg_music.mp3")           # optional
ATTACK_SFX_PATH = os.path.join(ASSETS_DIR, "attack.mp3")
ZOMBIE_DEATH_SFX_PATH = os.path.join(ASSETS_DIR, "dead.mp3")
GAME_OVER_SFX_PATH = os.path.join(ASSETS_DIR, "game_over.mp3")
AD_BANNER_PATH = os.path.join(ASSETS_DIR, "ad_banner.png")
AD_INTERSTITIAL_PATH = os.path.join(ASSETS_DIR, "ad_interstitial.png")
