from .config import BaseConfig, SugarConfig
