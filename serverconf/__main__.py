"""
Validate the server startup parameters found in the environment.

Exits with status 1 and logs the error message if any parameter is
missing or invalid.
"""

import sys
import argparse

from serverconf.config import ConfigurationError, EnvConfigProvider, load_server_config
from serverconf.logger import init_logger


def main(argv=None):
    parser = argparse.ArgumentParser(description="Validate server startup parameters")
    parser.add_argument("--env-prefix", default="SERVERCONF_",
                        help="Prefix of the environment variables holding parameters")
    parser.add_argument("--debug", action="store_true", help="Verbose output")
    parser.add_argument("--json-logs", action="store_true", help="Render logs as JSON")

    args = parser.parse_args(argv)

    logger = init_logger(debug=args.debug, json_logs=args.json_logs)

    try:
        config = load_server_config(EnvConfigProvider(prefix=args.env_prefix))
    except ConfigurationError as e:
        logger.error(e.message, parameter=e.field)
        return 1

    logger.info("Startup parameters valid", node_id_file=config.node_id_file)
    return 0


if __name__ == "__main__":
    sys.exit(main())
