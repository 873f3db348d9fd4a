import argparse
import logging
import sys

from .Parser import parse_source
from .TreePrinter import write_tree
from .config import GeneratorConfig

log = logging.getLogger(__name__)


def main(argv=None, config=None):
    parser = argparse.ArgumentParser(
        prog="astgen",
        description="Build the abstract syntax tree of a Java-subset source file and write it to AST.txt.")
    parser.add_argument("source", help="path of the source file to parse")
    args = parser.parse_args(argv)
    config = config or GeneratorConfig()

    logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")

    # The output file is created (or truncated) whether or not parsing succeeds.
    with open(config.output_file, "w", encoding=config.encoding) as out:
        try:
            with open(args.source, "r", encoding=config.encoding) as inputFile:
                data = inputFile.read()
        except OSError as e:
            print(f"Error: could not read {args.source}")
            log.error("%s", e)
            return 1

        context = parse_source(data)
        if not context.succeeded:
            print("Unsuccessful")
            log.info("%d error(s) in %s", context.error_count, args.source)
            return 0

        print("Parsing succesful")
        print("AST generated")
        out.write(config.header + "\n")
        write_tree(context.root, out)
        out.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
