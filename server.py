import sys

from emptyok.server import main

if __name__ == "__main__":
    # Serves "/" on 127.0.0.1:8080, exits 1 if the port can't be bound
    sys.exit(main())
