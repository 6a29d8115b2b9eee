APP_NAME = "modkit"
