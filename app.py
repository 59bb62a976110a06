import logging

from dogmeet import create_app
from dogmeet.config import validate_config
from dogmeet.errors import ConfigError

logger = logging.getLogger("dogmeet")

app = create_app()

if __name__ == "__main__":
    missing = validate_config(app.config)
    if missing:
        raise ConfigError(f"Missing required configuration: {', '.join(missing)}")
    port = app.config["PORT"]
    logger.info("Server is running on http://localhost:%s", port)
    app.run(host="0.0.0.0", port=port)
