__all__ = ['Settings', 'settings']

import logging

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix='BRAS_', extra='ignore')
    
    reject_repeated_digits: bool = Field(True, description='reject numbers made of a single repeated digit')


settings = Settings()

if not settings.reject_repeated_digits:
    logger.debug('repeated digit numbers are accepted when the checksum matches')
