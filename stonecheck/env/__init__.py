from .gym_env import StonecheckEnv

__all__ = ["StonecheckEnv"]
