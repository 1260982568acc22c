import os
from dataclasses import dataclass

@dataclass
class ChecksumDefaults:
    kind: str = os.getenv('SEGUID_TYPE', 'seguid')
    alphabet: str = os.getenv('SEGUID_ALPHABET', '{DNA}')
    # long | short | both
    form: str = os.getenv('SEGUID_FORM', 'long')

@dataclass
class LoggingConfig:
    level: str = os.getenv('SEGUID_LOG_LEVEL', 'WARNING').upper()
    format: str = '%(levelname)s %(name)s: %(message)s'

DEFAULTS = ChecksumDefaults()
LOGGING = LoggingConfig()
