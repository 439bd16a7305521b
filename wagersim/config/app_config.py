#!filepath: wagersim/config/app_config.py
import os

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel

from .log_config import LogConfig
from .simulation_config import SimulationConfig, GeneticConfig
from ..utils.errors import ConfigError


def project_root() -> str:
    """
    返回项目根目录（基于当前文件位置推导）:
    wagersim/config/app_config.py → wagersim/config → wagersim → project_root
    """
    return os.path.abspath(os.path.join(os.path.dirname(__file__), "../../"))


def default_config_path() -> str:
    return os.path.join(os.path.dirname(os.path.abspath(__file__)), "base.yml")


class AppConfig(BaseModel):
    log: LogConfig = LogConfig()
    simulation: SimulationConfig = SimulationConfig()
    genetic: GeneticConfig = GeneticConfig()

    @classmethod
    def load(cls, path: str | None = None) -> "AppConfig":
        """
        加载 YAML 配置 + .env
        - 默认使用 wagersim/config/base.yml
        - .env 中的 WAGERSIM_LOG_LEVEL / WAGERSIM_SEED 覆盖 YAML
        """
        root = project_root()

        # 1) 先加载 .env（在项目根目录下）
        load_dotenv(os.path.join(root, ".env"))

        # 2) 决定配置文件路径
        if path is None:
            path = default_config_path()

        if not os.path.exists(path):
            raise ConfigError(f"Config file not found: {path}")

        # 3) 读取 YAML
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

        # 4) env 覆盖
        level = os.getenv("WAGERSIM_LOG_LEVEL")
        if level:
            raw.setdefault("log", {})["level"] = level

        seed = os.getenv("WAGERSIM_SEED")
        if seed:
            raw.setdefault("simulation", {})["seed"] = int(seed)
            raw.setdefault("genetic", {})["seed"] = int(seed)

        return cls(**raw)
