"""Application settings and validation.

The listening address, CORS policy and log level are fixed values; the
service reads nothing from the environment.
"""


class Settings:
    HOST: str
    PORT: int
    LOG_LEVEL: str

    def __init__(self):
        self.HOST = "0.0.0.0"
        self.PORT = 3902
        self.LOG_LEVEL = "INFO"
        self._validate()

    def _validate(self):
        if not 0 < self.PORT < 65536:
            raise RuntimeError(f"PORT must be between 1 and 65535, got {self.PORT}")


settings = Settings()
