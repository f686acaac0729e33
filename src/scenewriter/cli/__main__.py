"""Allow ``python -m scenewriter.cli``."""

from scenewriter.cli.main import main

main()
