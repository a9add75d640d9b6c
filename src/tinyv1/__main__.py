# Reads one or more tiny v1 files and reports what they contain

import logging
import sys
from argparse import ArgumentParser
from typing import List, Optional

from tinyv1 import loader
from tinyv1.loader import LoadError
from tinyv1.parser import TinyV1Error


def main(argv: Optional[List[str]] = None) -> int:
    """ Entry point """

    parser = ArgumentParser(prog='tinyv1', description='Parses tiny v1 mapping files and prints a summary of each.')

    parser.add_argument('files', nargs='+', metavar='FILE', help='The tiny v1 files to read.')
    parser.add_argument('--namespaces', action='store_true', dest='namespaces', default=False, help='Also prints every namespace declared in the header, in column order.')
    parser.add_argument('-v', '--verbose', action='store_true', dest='verbose', default=False, help='Enables debug logging.')

    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    failed = False
    for file_path in args.files:
        logging.info('Loading %s' % file_path)
        try:
            tiny = loader.load_tiny(file_path)
        except TinyV1Error as e:
            print('Error parsing %s: %s' % (file_path, e.message), file=sys.stderr)
            failed = True
            continue
        except LoadError as e:
            print('Error loading %s: %s' % (file_path, e.__cause__), file=sys.stderr)
            failed = True
            continue

        print('%s: %s' % (file_path, tiny))
        if args.namespaces:
            for namespace in tiny.header.all_namespaces:
                print('  %s' % namespace)

    return 1 if failed else 0


if __name__ == '__main__':
    sys.exit(main())
