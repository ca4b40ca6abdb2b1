"""
Command-line entry point for the multiplexing simulator.

Usage: python main.py [settings.py]
"""

from muxsim.main import main


if __name__ == "__main__":
    main()
