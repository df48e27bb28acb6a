from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from envtyped.utils import EnvConfig, get_logger


def bootstrap(env_path: str | Path | None = None, *, override: bool = False) -> EnvConfig:
    """
    Populates os.environ from a dotenv file, then returns an accessor over it.
    Existing process variables win unless override is set.
    """
    log = get_logger("envtyped.boot")

    path = str(env_path) if env_path is not None else find_dotenv(usecwd=True)
    if path and Path(path).is_file():
        load_dotenv(dotenv_path=path, override=override)
        log.info("dotenv loaded", extra={"path": path, "override": override})
    else:
        log.info("no dotenv file, using process environment", extra={"path": path or None})

    return EnvConfig()
