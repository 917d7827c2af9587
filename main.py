# main.py - run the emoji predictor shell from a source checkout

from emoji_predictor.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
