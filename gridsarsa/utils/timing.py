import os
import time
import logging
import functools
from typing import List, Tuple

PROFILE_FILE = "time_profile.txt"

# 统一拿到命名 logger（与 LoggerManager 内一致）
def _get_logger():
    return logging.getLogger("RLLogger")

# (任务名, 耗时秒数)，进程内累积
tasks: List[Tuple[str, float]] = []

def add_task(task_name: str, time_taken: float):
    tasks.append((task_name, time_taken))

def record_time_decorator(task_name: str):
    """记录被装饰函数（如 SarsaPlanner.train）的耗时，写日志并追加到 tasks。"""
    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            st = time.perf_counter()
            result = func(*args, **kwargs)
            total_time = round(time.perf_counter() - st, 4)
            _get_logger().info("%s running time: %s seconds", task_name, total_time)
            add_task(task_name=task_name, time_taken=total_time)
            return result
        return wrapper
    return decorator

def out_profile(output_folder: str) -> str:
    """把 tasks 写到 output_folder/time_profile.txt，返回写出的路径。"""
    os.makedirs(output_folder, exist_ok=True)
    path = os.path.join(output_folder, PROFILE_FILE)
    with open(path, "w", encoding="utf-8") as file:
        for task, time_taken in tasks:
            file.write(f"{task}: {time_taken}\n")
    return path
