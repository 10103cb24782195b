"""
Configuration loader with validation.
"""
from dotenv import load_dotenv
from .config import DashboardConfig, resolve_project_path
from .config_validator import get_optional_env, get_int_env, validate_path


def load_config_from_env(check_paths: bool = True) -> DashboardConfig:
    """
    Load configuration from environment variables with validation.

    Usage:
        config = load_config_from_env()
        app = DashboardApp(config, data_service)
        app.initialize()

    :param check_paths: Whether the fixture path must exist
    :return: Validated DashboardConfig instance
    :raises: ConfigurationError if values are missing or invalid
    """
    # Load .env file if it exists (for local development)
    load_dotenv()

    defaults = DashboardConfig()

    config = DashboardConfig(
        fixture_path=get_optional_env("DASHBOARD_FIXTURE_PATH", default=defaults.fixture_path),
        warning_window_days=get_int_env(
            "DASHBOARD_WARNING_WINDOW_DAYS", defaults.warning_window_days
        ),
        empty_result_message=get_optional_env(
            "DASHBOARD_EMPTY_RESULT_MESSAGE", default=defaults.empty_result_message
        ),
        analysis_error_message=get_optional_env(
            "DASHBOARD_ANALYSIS_ERROR_MESSAGE", default=defaults.analysis_error_message
        ),
        channel_info_error_message=get_optional_env(
            "DASHBOARD_CHANNEL_INFO_ERROR_MESSAGE", default=defaults.channel_info_error_message
        ),
        report_error_message=get_optional_env(
            "DASHBOARD_REPORT_ERROR_MESSAGE", default=defaults.report_error_message
        ),
        log_level=get_optional_env("DASHBOARD_LOG_LEVEL", default=defaults.log_level).upper(),
        logs_dir=get_optional_env("DASHBOARD_LOGS_DIR"),
        max_log_files=get_int_env("DASHBOARD_MAX_LOG_FILES", defaults.max_log_files, minimum=1),
    )

    if check_paths:
        config.fixture_path = resolve_project_path(config.fixture_path)
        validate_path(config.fixture_path, "DASHBOARD_FIXTURE_PATH", must_exist=True)

    return config
