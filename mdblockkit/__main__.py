from mdblockkit.cli import entrypoint

entrypoint()
