from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    debug: bool = False
    log_level: str = "INFO"  # advisory; host applications configure handlers

    # Composite scoring
    apply_seniority_adjustment: bool = True  # fulltime weights follow JD seniority/role
    max_action_items: int = 8

    # Pins the year "Present" resolves to; None means the current year
    reference_year: int | None = None

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_prefix": "RESUME_FIT_"}


settings = Settings()
