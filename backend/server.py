import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger
from pydantic import BaseModel, Field

# Load env vars
load_dotenv()

BASE_DIR = Path(__file__).resolve().parent.parent
sys.path.append(str(BASE_DIR))

from video_lab.config_manager import AppConfig, ConfigManager  # noqa: E402
from video_lab.engine import VideoPackageGenerator  # noqa: E402
from video_lab.errors import InvalidSeedError  # noqa: E402
from video_lab.packaging.models import VideoPackage  # noqa: E402
from video_lab.planning.models import Brief  # noqa: E402


# Bridge standard logging (uvicorn, fastapi) into loguru
class InterceptHandler(logging.Handler):
    def emit(self, record):
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find caller from where originated the logged message
        frame, depth = logging.currentframe(), 2
        while frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
logging.getLogger("uvicorn").handlers = [InterceptHandler()]
logging.getLogger("uvicorn.access").handlers = [InterceptHandler()]


def load_config_manager() -> ConfigManager:
    config_path = os.getenv("VIDEO_LAB_CONFIG", str(BASE_DIR / "config" / "settings.yaml"))
    try:
        return ConfigManager(config_path)
    except FileNotFoundError as e:
        logger.warning(f"{e}. Falling back to default settings.")
        return ConfigManager(config_path, config=AppConfig())


config_manager = load_config_manager()
settings = config_manager.config
generator = VideoPackageGenerator(config_manager)

# --- App Configuration ---
app = FastAPI(title="Video Lab Backend")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.server.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# --- Data Models ---
class GenerateRequest(Brief):
    seed: int = Field(default=1, ge=1)

    def to_brief(self) -> Brief:
        return Brief.model_validate(self.model_dump(exclude={"seed"}))


class ShuffleResponse(BaseModel):
    seed: int
    package: VideoPackage


@app.exception_handler(InvalidSeedError)
async def invalid_seed_handler(request: Request, exc: InvalidSeedError):
    return JSONResponse(status_code=400, content={"detail": str(exc)})


@app.post("/generate", response_model=VideoPackage)
async def generate(request: GenerateRequest):
    return generator.generate(request.to_brief(), request.seed)


@app.post("/shuffle", response_model=ShuffleResponse)
async def shuffle(request: GenerateRequest):
    next_seed, package = generator.shuffle(request.to_brief(), request.seed)
    return ShuffleResponse(seed=next_seed, package=package)


@app.get("/health")
async def health_check():
    return {"status": "ok"}


@app.get("/settings")
async def get_settings():
    return settings.model_dump()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.server.host, port=settings.server.port)
