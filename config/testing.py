DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

PAY_RULES = {}
