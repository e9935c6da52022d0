"""Allow ``python -m quire.pipeline.cli``."""
from quire.pipeline.cli import main

main()
