"""tsserver-launch: start the TypeScript server with the right node and NODE_PATH."""

__version__ = "0.1.0"
