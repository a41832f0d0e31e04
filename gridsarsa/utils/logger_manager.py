# -*- coding: utf-8 -*-
from __future__ import annotations
import logging
import os
from torch.utils.tensorboard import SummaryWriter

class LoggerManager:
    """
    统一管理 logging 与 tensorboard writer。

    "RLLogger" 是进程内共享的命名 logger：构造时会先移除其上已有的 handler，
    因此重复构造不会重复输出，但同时存在多个实例（多个 planner）时，
    只有最后构造的那个会写入自己的 run.log，之前实例的文件 handler 被关闭。
    close() 同样会移除当前挂在该 logger 上的所有 handler。
    """
    def __init__(self, log_dir: str = "logs/", use_tensorboard: bool = True):
        os.makedirs(log_dir, exist_ok=True)

        # ---- Python logging ----
        self.logger = logging.getLogger("RLLogger")
        self.logger.setLevel(logging.INFO)
        self._drop_handlers()

        fmt = logging.Formatter(
            fmt="%(asctime)s %(levelname)s %(module)s - %(funcName)s: %(message)s",
            datefmt="%m/%d/%Y %I:%M:%S %p",
        )

        file_handler = logging.FileHandler(os.path.join(log_dir, "run.log"), mode="w", encoding="utf-8")
        file_handler.setFormatter(fmt)

        console_handler = logging.StreamHandler()
        console_handler.setFormatter(fmt)

        self.logger.addHandler(file_handler)
        self.logger.addHandler(console_handler)

        # ---- Tensorboard Writer ----
        self.writer = SummaryWriter(log_dir) if use_tensorboard else None

    def log(self, msg: str):
        self.logger.info(msg)

    def add_scalar(self, tag: str, value: float, step: int):
        if self.writer is not None:
            self.writer.add_scalar(tag, value, step)

    def close(self):
        if self.writer is not None:
            self.writer.close()
            self.writer = None
        self._drop_handlers()

    def _drop_handlers(self):
        for h in list(self.logger.handlers):
            self.logger.removeHandler(h)
            h.close()
