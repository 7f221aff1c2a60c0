from decouple import AutoConfig, Csv
from pathlib import Path

config = AutoConfig()


class Config:
    def __init__(self):
        # Environment
        self.ENV = config("ENV", default="development")

        # Database
        self.DATABASE_URL = config("DATABASE_URL", default="")
        self.DB_HOST = config("DB_HOST", default="localhost")
        self.DB_PORT = config("DB_PORT", default=5432, cast=int)
        self.DB_USER = config("DB_USER", default="market")
        self.DB_PASSWORD = config("DB_PASSWORD", default="market123")
        self.DB_NAME = config("DB_NAME", default="campus_market")
        self.SQLALCHEMY_TRACK_MODIFICATIONS = False

        # Auth
        self.SECRET_KEY = config("SECRET_KEY", default="dev-secret-key")
        self.SESSION_COOKIE_NAME = "market_session"
        self.AUTH_EMAIL_HEADER = config(
            "AUTH_EMAIL_HEADER", default="X-Auth-Request-Email"
        )
        self.AUTH_NAME_HEADER = config("AUTH_NAME_HEADER", default="X-Auth-Request-User")
        self.ALLOWED_EMAIL_DOMAINS = config(
            "ALLOWED_EMAIL_DOMAINS",
            default="iitkgp.ac.in,kgpian.iitkgp.ac.in,gmail.com",
            cast=Csv(),
        )

        # Search
        self.SEARCH_MAX_RESULTS = config("SEARCH_MAX_RESULTS", default=100, cast=int)
        self.GLOBAL_SEARCH_MAX_RESULTS = config(
            "GLOBAL_SEARCH_MAX_RESULTS", default=20, cast=int
        )
        self.GLOBAL_SEARCH_CAP_MODE = config(
            "GLOBAL_SEARCH_CAP_MODE", default="per_type"
        )
        self.SEARCH_SUGGESTION_COUNT = config(
            "SEARCH_SUGGESTION_COUNT", default=5, cast=int
        )

        # App
        self.BIND = config("BIND", default="127.0.0.1:8000")
        self.DEBUG = config("DEBUG", default=True, cast=bool)
        self.CORS_ORIGINS = config("CORS_ORIGINS", default="*", cast=Csv())

        # Logging
        self.LOG_DIR = Path(config("LOG_DIR", default="logs"))
        self.LOG_LEVEL = config("LOG_LEVEL", default="INFO")

        # API docs (flask-smorest)
        self.API_TITLE = "Campus Market API"
        self.API_VERSION = "v1"
        self.OPENAPI_VERSION = "3.0.3"
        self.OPENAPI_URL_PREFIX = config("OPENAPI_URL_PREFIX", default="/docs")
        self.OPENAPI_JSON_PATH = "openapi.json"

    @property
    def SQLALCHEMY_DATABASE_URI(self):
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return f"postgresql+psycopg2://{self.DB_USER}:{self.DB_PASSWORD}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"


settings = Config()
