import os
import sys

# test/ on path so _helper is importable (no package: "test" would shadow stdlib)
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))
