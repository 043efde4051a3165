import sys

from biopics_mcp.main import main

if __name__ == "__main__":
    sys.exit(main())
