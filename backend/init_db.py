"""Create the AssetHub schema and seed the default tenant.

Run from the ``backend`` directory: ``python init_db.py``. Production
databases are migrated with Alembic instead (``alembic upgrade head``).
"""

from assethub.core import settings, setup_logging
from assethub.core.logging import get_logger
from assethub.db.utils import seed_with_new_session


def main() -> None:
    setup_logging()
    seed_with_new_session()
    get_logger(__name__).info(
        "Database initialised",
        extra={"tenant": settings.default_tenant_token},
    )


if __name__ == "__main__":
    main()
