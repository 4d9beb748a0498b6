"""skills-ws — agent skills for AI.

Installs skill packages (a SKILL.md manifest plus reference and script
files) from the bundled catalog into the skills folder of the agent in use.
"""

from pathlib import Path

__version__ = "0.3.0"

MANIFEST_FILE = "SKILL.md"

BUNDLED_CATALOG = Path(__file__).parent / "skills"
