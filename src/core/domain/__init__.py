"""Domain models for azureauth-cli.

Pure, strict data structures (Pydantic v2). The domain knows nothing about
subprocesses, terminals or the CLI: only what a token request *is*.
"""
