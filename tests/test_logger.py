import json

from loguru import logger

from video_lab.utils.logger import setup_logger


def test_setup_logger_creates_sinks(tmp_path):
    log_dir = tmp_path / "logs"
    try:
        setup_logger(log_dir=str(log_dir), level="ERROR", file_stem="render")
        logger.info("package ready")
    finally:
        logger.remove()

    assert "package ready" in (log_dir / "render.log").read_text()
    record = json.loads((log_dir / "render.json.log").read_text().splitlines()[-1])
    assert record["record"]["message"] == "package ready"
    assert (log_dir / "render.error.log").read_text() == ""
