import sys
from pathlib import Path

# Make tests/ importable for the shared fakes module
sys.path.insert(0, str(Path(__file__).resolve().parent))
