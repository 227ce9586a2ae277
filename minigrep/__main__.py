import sys

from minigrep.cli import main

main(["minigrep", *sys.argv[1:]])
