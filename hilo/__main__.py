import sys

from hilo.higher_lower.higher_lower import main

sys.exit(main())
