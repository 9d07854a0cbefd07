"""Allow `python -m stressdomain`."""
from stressdomain.main import main

if __name__ == "__main__":
    main()
