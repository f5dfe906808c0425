"""
Animation Configuration Settings

All configuration constants for the animation host.
Modify these values to change playback and capture behavior.
"""

from pathlib import Path

# ============================================================================
# Project Paths
# ============================================================================

PROJECT_ROOT = Path(__file__).parent.parent.parent.parent
ASSETS_DIR = PROJECT_ROOT / "assets"
TEXTURES_DIR = ASSETS_DIR / "textures"
OUTPUT_DIR = PROJECT_ROOT / "output" / "frames"

# ============================================================================
# Playback
# ============================================================================

FRAME_COUNT = 100            # Update cycles run by the headless app
FIXED_TIME_STEP = 1.0 / 60.0 # Seconds per cycle for the deterministic clock
USE_WALL_CLOCK = False       # True = measure real time instead of fixed steps

# ============================================================================
# Render Target (headless frame capture)
# ============================================================================

RENDER_TARGET_SIZE = (1280, 720)           # Width, Height in pixels
CLEAR_COLOR = (0.4, 0.4, 0.4, 1.0)         # Linear RGBA background
DEFAULT_SPRITE_SIZE = (64.0, 64.0)         # Used when a sprite has no texture or custom size
FRAME_FILENAME = "frame_{index:04d}.png"   # Saved frame naming

# ============================================================================
# Demo Scene
# ============================================================================

DEMO_TEXTURE = "icon.png"    # Looked up under TEXTURES_DIR; solid quad if missing
DEMO_SLIDE_DISTANCE = 500.0  # Sprite travel along x (world units)
DEMO_SLIDE_DURATION = 10.0   # Seconds to cover the distance

# ============================================================================
# Logging
# ============================================================================

LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
