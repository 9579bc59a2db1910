"""ENS compatible blockchain name service back end."""

from swarmresolver.resolution.ens.client import ClientConfig, ENSClient
from swarmresolver.resolution.ens.contenthash import decode, encode_swarm

__all__ = [
    "ClientConfig",
    "ENSClient",
    "decode",
    "encode_swarm",
]
