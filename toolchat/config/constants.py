"""Hard-coded configuration constants not meant to be user-configurable."""

DEFAULT_MODEL_NAME = "qwen-coder-turbo"
DEFAULT_MODEL_TEMPERATURE = 0.0
DOTENV_FILENAME = ".env"
