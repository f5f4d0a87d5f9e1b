from .settings import CONFIGS, BaseConfig, DevelopmentConfig, ProductionConfig, TestingConfig

__all__ = ['CONFIGS', 'BaseConfig', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig']
