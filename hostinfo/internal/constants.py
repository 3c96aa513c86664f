APP_NAME = "hostinfo"

# Substituted for any hardware detail that could not be determined
PLACEHOLDER = "-"

LOG_LEVEL_ENV = "HOSTINFO_LOG_LEVEL"
HOME_ENV = "HOSTINFO_HOME"
