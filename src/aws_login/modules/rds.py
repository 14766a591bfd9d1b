"""Generate a token for accessing an RDS Proxy using IAM."""

from dataclasses import dataclass
from typing import List, Optional

from ..core import AppError, Context, aws, error_context, select

# The port used when none is given; only valid for PostgreSQL.
DEFAULT_PORT = "5432"


@dataclass
class Proxy:
    """An available RDS Proxy."""

    name: str
    endpoint: str
    engine: str
    require_tls: bool

    def __str__(self) -> str:
        return self.name


def parse_proxies(output: str) -> List[Proxy]:
    """Parse the tab separated proxy list, keeping available proxies only."""
    proxies = []

    for line in output.strip().splitlines():
        if not line.strip():
            continue
        parts = line.split("\t")
        if len(parts) != 5:
            raise AppError(1, f"Unexpected RDS Proxy description: {line}")

        name, endpoint, engine, require_tls, status = parts
        if status != "available":
            continue

        proxies.append(
            Proxy(
                name=name,
                endpoint=endpoint,
                engine=engine,
                require_tls=require_tls.strip().lower() == "true",
            )
        )

    return proxies


def get_proxies(context: Context) -> List[Proxy]:
    with error_context("Could not get RDS Proxy host names from AWS CLI."):
        output = (
            aws(context)
            .arg("rds")
            .arg("describe-db-proxies")
            .arg("--query")
            .arg("DBProxies[].[DBProxyName,Endpoint,EngineFamily,RequireTLS,Status]")
            .arg("--output")
            .arg("text")
            .output()
        )
    return parse_proxies(output)


def execute(context: Context, username: str, port: Optional[str] = None) -> None:
    proxies = get_proxies(context)
    if not proxies:
        raise AppError(1, "There are no RDS Proxies available.")

    proxy = select("Please select an RDS Proxy:", proxies)

    if proxy.engine != "POSTGRESQL" and port is None:
        raise AppError(
            1, f"The database server port number is required for {proxy.engine} engines."
        )

    if proxy.require_tls:
        context.errorln("Warning: This connection requires TLS to be used.\n")

    (
        aws(context)
        .arg("rds")
        .arg("generate-db-auth-token")
        .arg("--hostname")
        .arg(proxy.endpoint)
        .arg("--port")
        .arg(port or DEFAULT_PORT)
        .arg("--username")
        .arg(username)
        .pass_through(context)
    )
