from dotenv import load_dotenv
from pydantic import BaseModel
import os
load_dotenv()

class Settings:
    # Dataset shape is fixed at source level; only diagnostics come from env.
    NUM_VECS = 50
    DIM = 12
    MAX = 20

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

settings = Settings()


class GeneratorConfig(BaseModel):
    num_vecs: int = settings.NUM_VECS
    dim: int = settings.DIM
    max: float = settings.MAX


def default_config():
    return GeneratorConfig()
