"""
Settings and file locations for gitmoji_helper.

See :mod:`gitmoji_helper.config.loader` for the settings store and
:mod:`gitmoji_helper.config.paths` for where files are kept.
"""

from .loader import Configuration, ConfigurationStore, EmojiFormat, render_emoji_format  # noqa: F401
from .paths import GITMOJI_URL, AppPaths  # noqa: F401
