#!/usr/bin/python

import argparse
import logging
import os
import sys
import unittest

from tattler.shared import logging_config

root = os.path.abspath(os.path.dirname(__file__))


def lister(start):
    suites = unittest.TestSuite()
    loader = unittest.defaultTestLoader
    for dirname, _, files in sorted(os.walk(start)):
        for f in sorted(files):
            if not f.endswith('_unittest.py'):
                continue
            temp = os.path.join(dirname, f)[:-len('.py')]
            mod_name = '.'.join(temp[len(root) + 1:].split(os.path.sep))
            logging.debug('Adding %s as a valid test', mod_name)
            suites.addTest(loader.loadTestsFromName(mod_name))
    return suites


def main():
    parser = argparse.ArgumentParser(description='Run the tattler unittests')
    parser.add_argument('start', nargs='?', default='tattler',
                        help='directory to collect *_unittest.py from')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='log at DEBUG level while running')
    options = parser.parse_args()

    logging_config.LoggingConfig().configure_logging(verbose=options.verbose)
    sys.path.insert(0, root)
    suites = lister(os.path.join(root, options.start))
    runner = unittest.TextTestRunner(verbosity=2)
    result = runner.run(suites)
    return 0 if result.wasSuccessful() else 1


if __name__ == "__main__":
    sys.exit(main())
