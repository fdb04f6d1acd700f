import sys

from clip_relay.launcher import main

sys.exit(main())
