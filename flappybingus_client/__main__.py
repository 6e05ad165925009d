"""Allow `python -m flappybingus_client`."""

from flappybingus_client.cli import main

if __name__ == "__main__":
    main()
