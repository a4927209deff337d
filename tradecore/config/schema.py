# config/schema.py

"""
Configuration schema for validation.
"""

from tradecore.num import ROUNDING_MODES

PRICE_NAMES = ['close', 'open', 'high', 'low', 'volume']

CONFIG_SCHEMA = {
    'type': 'dict',
    'properties': {
        'numeric': {
            'type': 'dict',
            'properties': {
                'precision': {
                    'type': 'int',
                    'min': 1,
                    'max': 1000,
                    'default': 32
                },
                'rounding': {
                    'type': 'str',
                    'enum': list(ROUNDING_MODES),
                    'default': 'ROUND_HALF_UP'
                }
            }
        },
        'trading': {
            'type': 'dict',
            'properties': {
                'entry_type': {
                    'type': 'str',
                    'enum': ['BUY', 'SELL'],
                    'default': 'BUY'
                }
            }
        },
        'rules': {
            'type': 'dict',
            'properties': {
                'moving_stop_gain': {
                    'type': 'dict',
                    'properties': {
                        'gain_percentage': {
                            'type': 'float',
                            'min': 0,
                            'max': 100,
                            'default': 3
                        },
                        'frames': {
                            'type': 'int',
                            'min': 1,
                            'default': 5
                        },
                        'price': {
                            'type': 'str',
                            'enum': PRICE_NAMES,
                            'default': 'close'
                        }
                    }
                },
                'moving_stop_loss': {
                    'type': 'dict',
                    'properties': {
                        'loss_percentage': {
                            'type': 'float',
                            'min': 0,
                            'max': 100,
                            'default': 3
                        },
                        'frames': {
                            'type': 'int',
                            'min': 1,
                            'default': 5
                        },
                        'price': {
                            'type': 'str',
                            'enum': PRICE_NAMES,
                            'default': 'close'
                        }
                    }
                }
            }
        },
        'logging': {
            'type': 'dict',
            'properties': {
                'level': {
                    'type': 'str',
                    'enum': ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                    'default': 'INFO'
                },
                'trace_rules': {
                    'type': 'bool',
                    'default': False
                }
            }
        }
    }
}
