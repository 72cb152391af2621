import os
from typing import Dict, NamedTuple, Tuple

from automation_exercise.common.config import Config
from automation_exercise.common.errors import EnvironmentConfigurationError

SUPPORTED_ENVIRONMENTS: Tuple[str, ...] = ("staging", "preprod")


class EnvironmentUrls(NamedTuple):
    api: str
    ui: str


# automationexercise.com publishes a single site; preprod targets the bare domain
ENVIRONMENT_URLS: Dict[str, EnvironmentUrls] = {
    "staging": EnvironmentUrls(
        api="https://automationexercise.com",
        ui="https://www.automationexercise.com",
    ),
    "preprod": EnvironmentUrls(
        api="https://automationexercise.com",
        ui="https://automationexercise.com",
    ),
}


def get_validated_environment(fallback: str = "staging") -> str:
    """
    Validate and return the current environment.

    Args:
        fallback: Environment used when ENVIRONMENT is unset

    Returns:
        The validated environment name

    Raises:
        EnvironmentConfigurationError: if the environment is not supported
    """
    current_env = os.getenv("ENVIRONMENT") or fallback

    if not is_supported_environment(current_env):
        supported_list = ", ".join(SUPPORTED_ENVIRONMENTS)
        raise EnvironmentConfigurationError(
            f'Invalid ENVIRONMENT: "{current_env}". '
            f"Supported environments are: {supported_list}. "
            f"Please set ENVIRONMENT to one of these values or use the default fallback."
        )

    return current_env


def is_supported_environment(env: str) -> bool:
    return env in SUPPORTED_ENVIRONMENTS


def get_supported_environments() -> Tuple[str, ...]:
    return SUPPORTED_ENVIRONMENTS


def init_url() -> EnvironmentUrls:
    """
    Return the api/ui hosts for the validated environment.

    BASE_URL and API_BASE_URL, when set, replace the mapped hosts.

    Raises:
        EnvironmentConfigurationError: if ENVIRONMENT is not supported
    """
    hosts = ENVIRONMENT_URLS[get_validated_environment()]
    return EnvironmentUrls(
        api=Config.API_BASE_URL or hosts.api,
        ui=Config.BASE_URL or hosts.ui,
    )
