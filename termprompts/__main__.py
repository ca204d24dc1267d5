"""
module termprompts.__main__

Default entrypoint when termprompts is invoked on the console by a user.
Calls the main() function in termprompts.entrypoint
"""

import sys

from .entrypoint import main

sys.exit(main())
