#!filepath: wagersim/utils/logger.py
import os
from functools import wraps
from time import perf_counter
from typing import Callable

from loguru import logger

# 首次配置时写一条分隔行
_LOGGER_CONFIGURED = False


class Logging:
    """
    Simulation 日志
    ---------------------------------------
    - 文件按日期切割 + 保留周期（LogConfig）
    - replay 热路径只写 DEBUG
    - catch(): 记录异常后继续抛出
    ---------------------------------------
    """

    def __init__(
        self,
        log_dir: str = "logs",
        rotation: str = "1 day",
        retention: str = "30 days",
        log_level: str = "INFO",
    ):
        self.log_dir = log_dir
        self.rotation = rotation
        self.retention = retention
        self.level = log_level

        os.makedirs(self.log_dir, exist_ok=True)
        self._configure()

    @classmethod
    def from_config(cls, cfg) -> "Logging":
        """
        cfg: LogConfig
        """
        return cls(
            log_dir=cfg.dir,
            rotation=cfg.rotation,
            retention=cfg.retention,
            log_level=cfg.level,
        )

    def _configure(self) -> None:
        global _LOGGER_CONFIGURED

        logger.remove()
        logger.add(
            sink=f"{self.log_dir}/{{time:YYYY-MM-DD}}.log",
            rotation=self.rotation,
            retention=self.retention,
            level=self.level,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}",
            enqueue=True,  # 多进程 GA worker 共用一个文件
        )

        if not _LOGGER_CONFIGURED:
            logger.info("-----------wagersim logger initialized-----------")
        _LOGGER_CONFIGURED = True

    def debug(self, msg: str, *args, **kwargs):
        logger.debug(msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs):
        logger.info(msg, *args, **kwargs)

    def catch(self, msg: str = "Exception occurred", log_time: bool = False) -> Callable:
        """
        @logs.catch(msg="simulation replay failed")
        def simulate(...): ...

        异常：logger.exception 后原样抛出
        log_time=True：DEBUG 记录耗时
        """

        def decorator(func: Callable):
            @wraps(func)
            def wrapper(*args, **kwargs):
                start = perf_counter()

                try:
                    result = func(*args, **kwargs)
                except Exception:
                    logger.exception(f"[ERROR] {func.__name__}: {msg}")
                    raise

                if log_time:
                    logger.debug(f"[TIME] {func.__name__} took {perf_counter() - start:.4f}s")

                return result

            return wrapper

        return decorator


# 默认全局 logs（可被 Logging.from_config 替换）
logs = Logging()
