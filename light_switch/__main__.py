import sys

from light_switch.services.experiment import main

if __name__ == "__main__":
    sys.exit(main())
