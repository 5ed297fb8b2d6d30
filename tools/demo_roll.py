#!/usr/bin/env python3
"""Roll one skill check and print every step of its resolution.

Usage:
    python tools/demo_roll.py [skill] [seed]
"""

import sys
from random import Random

from d6pool.dice import roll_detailed
from d6pool.renderers import TextRenderer

args = sys.argv[1:3]
skill = int(args[0]) if args else 69
rng = Random(int(args[1])) if len(args) > 1 else Random()

print("\n".join(TextRenderer().render_roll(roll_detailed(skill, rng))))
