APP_NAME = "datrain"
