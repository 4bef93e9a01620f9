from __future__ import annotations

import importlib
import logging
from typing import Optional, TextIO

from dotenv import load_dotenv
from rich.console import Console

from .attendance.controller import register as register_attendance
from .config import get_settings_module
from .console import ConsoleApp
from .container import build_container
from .core.logging_config import setup_logging
from .exams.controller import register as register_exams
from .fees.controller import register as register_fees
from .people.controller import register as register_people
from .seed import seed_demo_data

logger = logging.getLogger(__name__)


def create_app(*, console: Optional[Console] = None, input_stream: Optional[TextIO] = None) -> ConsoleApp:
    load_dotenv(override=False)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)

    setup_logging(
        getattr(settings, "LOG_LEVEL", "INFO"),
        fmt=getattr(settings, "LOG_FORMAT", "text"),
        log_file=getattr(settings, "LOG_FILE", None),
    )
    logger.debug("Using settings %s", settings_module)

    container = build_container(
        university_name=getattr(settings, "UNIVERSITY_NAME"),
        id_seed=int(getattr(settings, "ID_SEED", 1000)),
        student_email_domain=getattr(settings, "STUDENT_EMAIL_DOMAIN"),
    )

    if bool(getattr(settings, "SEED_DEMO_DATA", False)):
        seed_demo_data(container.university)

    app = ConsoleApp(
        f"{container.university.name} Management System",
        console=console,
        input_stream=input_stream,
        debug=bool(getattr(settings, "DEBUG", False)),
    )

    register_people(app, container)
    register_exams(app, container)
    register_attendance(app, container)
    register_fees(app, container)

    return app


def main() -> None:
    create_app().run()


if __name__ == "__main__":
    main()
