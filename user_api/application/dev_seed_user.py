"""
Name: Dev Seed User
Description: Seed a development user on startup so the API can be exercised locally.
"""

from ..auth_users import hash_password
from ..config import Settings
from ..domain.repositories import UserRepository
from ..logger import logger


def ensure_dev_user(settings: Settings, repository: UserRepository) -> None:
    """
    R: Ensure a development user exists if configured.
    FAIL-FAST if enabled outside APP_ENV=local.
    """
    if not settings.dev_seed_user:
        return

    current_env = settings.app_env.strip().lower()
    if current_env != "local":
        raise RuntimeError(
            f"FATAL: DEV_SEED_USER is enabled but APP_ENV is '{current_env}' "
            "(must be 'local')."
        )

    target_email = settings.dev_seed_user_email.strip()
    logger.info("Dev seed user: ensuring user exists", extra={"email": target_email})

    if repository.get_user_by_email(target_email) is not None:
        logger.info("Dev seed user: already exists (skipping)")
        return

    user = repository.create_user(
        settings.dev_seed_user_first_name,
        settings.dev_seed_user_last_name,
        target_email,
        hash_password(settings.dev_seed_user_password),
    )
    logger.info("Dev seed user: created", extra={"user_id": user.id})
