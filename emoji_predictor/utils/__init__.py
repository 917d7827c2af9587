# emoji_predictor/utils/__init__.py
# logging setup and JSON config used by the terminal shell
