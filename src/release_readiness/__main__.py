"""Entry point for running the release readiness audit."""

from release_readiness import main

if __name__ == "__main__":
    main()
