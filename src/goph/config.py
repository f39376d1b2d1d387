"""Configuration handling for the Gopher client."""

from dataclasses import dataclass
from pathlib import Path
import yaml


@dataclass
class Config:
    """Configuration settings for the Gopher client.

    Attributes:
        home: Location opened at startup and by the home command.
        timeout_seconds: Socket timeout for connect and reads (None to block).
        max_line_length: Longest response line in bytes before truncation.
        recv_chunk_size: Bytes requested per socket read.
    """

    home: str = "gopher.floodgap.com"
    timeout_seconds: float | None = 30.0
    max_line_length: int = 512
    recv_chunk_size: int = 4096


def load_config(path: str | Path) -> Config:
    """
    Load configuration from a YAML file.

    Args:
        path: Path to the YAML configuration file.

    Returns:
        Config object with loaded values.

    Raises:
        FileNotFoundError: If config file doesn't exist.
    """
    config_path = Path(path).expanduser()

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(config_path) as f:
        data = yaml.safe_load(f) or {}

    # Extract sections
    client = data.get("client", {})
    network = data.get("network", {})

    return Config(
        home=client.get("home", Config.home),
        timeout_seconds=network.get("timeout_seconds", Config.timeout_seconds),
        max_line_length=network.get("max_line_length", Config.max_line_length),
        recv_chunk_size=network.get("recv_chunk_size", Config.recv_chunk_size),
    )
