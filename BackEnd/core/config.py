# Storage key of the session history blob.
STORAGE_KEY = "workSessions"

# Label given to sessions stopped without a task name.
DEFAULT_TASK_NAME = "Untitled Task"

# Live timer refresh period.
REFRESH_INTERVAL_MS = 1000

LOG_FILE = "worktime.log"
LOG_MAX_BYTES = 10 * 1024 * 1024
LOG_BACKUP_COUNT = 5
