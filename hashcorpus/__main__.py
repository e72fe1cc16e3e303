"""
Entry point for the `hashcorpus` command-line interface.

hashcorpus generates deterministic digest fixtures: byte corpora paired
with manifests of their SHA-1 and SHA-2 digests, for validating
independent hash implementations.
"""


def main():
    """Main entry point for the hashcorpus CLI."""
    from .cli import cli

    cli()


if __name__ == "__main__":
    main()
