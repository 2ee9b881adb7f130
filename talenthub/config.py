from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Required from environment (.env / deployment secrets)
    database_url: str
    secret_key: str
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60 * 24 * 7  # 7 days
    app_env: str = "development"  # development, staging, production

    # CORS origins as comma-separated values
    # Example: "https://app.example.com,https://admin.example.com"
    cors_allow_origins: str = "http://localhost:5173"

    log_level: str = "INFO"  # DEBUG, INFO, WARNING, ERROR

    # Base URL of the web app; assessment links are built from it.
    public_app_url: str = "http://localhost:5173"
    assessment_validity_days: int = 7

    # Recruiter -> candidate e-mail via Amazon SES
    notifications_enabled: bool = False
    aws_region: str = "us-west-2"
    ses_sender: str = "TalentHub <no-reply@talenthub.example>"

    # Request guards
    rate_limit_functions_per_min: int = 30
    rate_limit_submit_per_min: int = 10

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
