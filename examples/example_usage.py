"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; the business rules live in the services.
"""

from config import load_settings

from src.student_attendance.student_attendance.container import build_container


def main():
    settings = load_settings()
    container = build_container(data_file=settings.DATA_FILE, default_subject=settings.DEFAULT_SUBJECT)
    print(container.metrics_service.overview())
    print(container.metrics_service.rankings()[:5])


if __name__ == "__main__":
    main()
