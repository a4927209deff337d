# config/defaults.py

"""
Default configuration values.
"""

DEFAULT_CONFIG = {
    'numeric': {
        'precision': 32,
        'rounding': 'ROUND_HALF_UP'
    },
    'trading': {
        'entry_type': 'BUY'
    },
    'rules': {
        'moving_stop_gain': {
            'gain_percentage': 3,
            'frames': 5,
            'price': 'close'
        },
        'moving_stop_loss': {
            'loss_percentage': 3,
            'frames': 5,
            'price': 'close'
        }
    },
    'logging': {
        'level': 'INFO',
        'trace_rules': False
    }
}
