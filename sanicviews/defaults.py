"""
Framework Default Values
All hardcoded values should be defined here and accessed via Config.get()
These defaults can be overridden in config/view.py, config/app.py or at runtime
"""

# ============================================================================
# VIEW DEFAULTS
# ============================================================================

DEFAULT_VIEW_PATHS = ['views']
DEFAULT_VIEW_FILE_EXTENSION = '.html'

# {controller} is skipped when the action has no controller name
DEFAULT_VIEW_LOCATION_FORMATS = [
    '{controller}/{view}{extension}',
    'shared/{view}{extension}',
]

# ============================================================================
# RESPONSE DEFAULTS
# ============================================================================

DEFAULT_CONTENT_TYPE = 'text/html'
DEFAULT_CHARSET = 'utf-8'
DEFAULT_STATUS_CODE = 200
DEFAULT_WRITER_BUFFER_SIZE = 16 * 1024  # characters

# ============================================================================
# TEMP DATA DEFAULTS
# ============================================================================

DEFAULT_TEMP_DATA_SESSION_KEY = '_temp_data'

# ============================================================================
# LOGGING DEFAULTS
# ============================================================================

DEFAULT_LOG_DIR = 'storage/logs'
DEFAULT_LOG_MAX_BYTES = 10 * 1024 * 1024  # 10MB
DEFAULT_LOG_BACKUP_COUNT = 5
