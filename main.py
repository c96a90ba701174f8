# main.py

from uvicorn import run

from bloglist.configs import settings


def main() -> None:
    run(
        "bloglist.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.ENVIRONMENT == "development",
        log_level=settings.LOG_LEVEL.lower(),
        loop="uvloop",
        http="httptools",
    )


if __name__ == "__main__":
    main()
