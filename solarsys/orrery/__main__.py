# orrery/__main__.py
import sys
from orrery.app import main

sys.exit(main())
