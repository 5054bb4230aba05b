import sys
import os

# Add project root to path for imports
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from core.float_generator import create, seed, next_float


def main() -> None:
    """
    Example: seed a fresh generator with 42 and print one sample.
    """
    g = create()
    seed(g, 42)
    print(next_float(g))


if __name__ == "__main__":
    main()
