import argparse
import logging
import sys
import requests
from . import config
from .directory import DirectoryClient
from .exceptions import AppRoleGrantError, GraphApiError
from .graph_client import GraphClient
from .workflow import grant_app_role

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Grant a custom app role of a resource application to a managed identity."
    )
    parser.add_argument(
        "--resource-application-name",
        required=True,
        help="Display name (prefix) of the application that defines the role.",
    )
    parser.add_argument(
        "--role-name",
        required=True,
        help="Exact value of the app role to assign.",
    )
    parser.add_argument(
        "--msi-service-principal-name",
        required=True,
        help="Display name (prefix) of the managed identity service principal.",
    )
    parser.add_argument(
        "--log-level",
        default=config.LOG_LEVEL,
        choices=LOG_LEVELS,
        help="Logging verbosity (env: LOG_LEVEL).",
    )
    args = parser.parse_args(argv)
    # choices= is not applied to the default, which comes from LOG_LEVEL
    if args.log_level not in LOG_LEVELS:
        parser.error(
            f"invalid LOG_LEVEL {args.log_level!r} (choose from {', '.join(LOG_LEVELS)})"
        )
    return args


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=args.log_level, format="%(asctime)s %(levelname)s %(message)s"
    )

    try:
        directory = DirectoryClient(GraphClient())
        result = grant_app_role(
            directory,
            args.resource_application_name,
            args.role_name,
            args.msi_service_principal_name,
        )
    except (
        AppRoleGrantError,
        GraphApiError,
        requests.RequestException,
        ValueError,
    ) as e:
        logging.error(str(e))
        return 1

    print(
        f"Role {result.role_id} assigned to {result.principal_id} "
        f"on resource {result.resource_id}"
    )
    return 0


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
