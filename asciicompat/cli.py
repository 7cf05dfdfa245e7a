"""
# AsciiDoc-Compat: cli.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Command-line interface.
"""

import argparse
import os
import re
import sys

from asciicompat._version import __version__
from asciicompat.constants import (
    COMMAND_LINE_ERROR_EXIT_CODE,
    CONVERTED_FILE_EXTENSION,
    GENERIC_ERROR_EXIT_CODE,
    LEGACY_FILE_EXTENSION,
    WARNINGS_EXIT_CODE,
)
from asciicompat.core import preprocess
from asciicompat.diagnostics import DiagnosticLog

DESCRIPTION = '''
    Rewrite legacy AsciiDoc into AsciiDoc that Asciidoctor accepts.
'''
DOCUMENT_FILE_NAME_HELP = '''
    name of legacy AsciiDoc file to be rewritten
    (can be abbreviated as `file` or `file.`)
'''
ALL_MODE_HELP = '''
    rewrite all legacy AsciiDoc files under the working directory
'''
VERBOSE_MODE_HELP = '''
    run in verbose mode (prints every rewrite applied)
'''
STRICT_MODE_HELP = '''
    exit with status 3 if any warnings were emitted (files are still written)
'''


def is_legacy_file(file_name: str) -> bool:
    return file_name.endswith(LEGACY_FILE_EXTENSION)


def extract_document_name(document_file_name_argument: str) -> str:
    """
    Extract name-without-extension from a document file name argument.

    Here, document file name argument may be of the form `«name».asciidoc`, `«name».`, or `«name»`.
    The path is normalised by resolving `./` and `../`.
    """
    document_file_name_argument = os.path.normpath(document_file_name_argument)
    document_name = re.sub(pattern=r'[.](asciidoc)? \Z', repl='', string=document_file_name_argument, flags=re.VERBOSE)

    return document_name


def parse_command_line_arguments() -> argparse.Namespace:
    argument_parser = argparse.ArgumentParser(description=DESCRIPTION)
    argument_parser.add_argument(
        '-v', '--version',
        action='version',
        version=f'{argument_parser.prog} version {__version__}',
    )
    argument_parser.add_argument(
        '-a', '--all',
        dest='all_mode_enabled',
        action='store_true',
        help=ALL_MODE_HELP,
    )
    argument_parser.add_argument(
        '-x', '--verbose',
        dest='verbose_mode_enabled',
        action='store_true',
        help=VERBOSE_MODE_HELP,
    )
    argument_parser.add_argument(
        '-s', '--strict',
        dest='strict_mode_enabled',
        action='store_true',
        help=STRICT_MODE_HELP,
    )
    argument_parser.add_argument(
        'document_file_name_arguments',
        default=[],
        help=DOCUMENT_FILE_NAME_HELP,
        metavar=f'file{LEGACY_FILE_EXTENSION}',
        nargs='*',
    )

    return argument_parser.parse_args()


def generate_converted_file(document_file_name_argument: str, verbose_mode_enabled: bool,
                            uses_command_line_argument: bool) -> int:
    """
    Rewrite one legacy file into its converted file, returning the number of warnings emitted.
    """
    document_name = extract_document_name(document_file_name_argument)
    document_file_name = f'{document_name}{LEGACY_FILE_EXTENSION}'
    try:
        with open(document_file_name, 'r', encoding='utf-8') as document_file:
            text = document_file.read()
    except FileNotFoundError as file_not_found_error:
        if uses_command_line_argument:
            print(f'error: argument `{document_file_name_argument}`: file `{document_file_name}` not found',
                  file=sys.stderr)
            sys.exit(COMMAND_LINE_ERROR_EXIT_CODE)
        else:
            error_message = f'file `{document_file_name}` not found for `{document_file_name}` in document_file_names'
            raise FileNotFoundError(error_message) from file_not_found_error

    diagnostic_log = DiagnosticLog()
    converted_text = preprocess(text, document_file_name, diagnostic_log, verbose_mode_enabled=verbose_mode_enabled)
    diagnostic_log.print_diagnostics(file=sys.stderr)

    converted_file_name = f'{document_name}{CONVERTED_FILE_EXTENSION}'
    try:
        with open(converted_file_name, 'w', encoding='utf-8') as converted_file:
            converted_file.write(converted_text)
        print(f'success: wrote to `{converted_file_name}`')
    except IOError:
        print(f'error: cannot write to `{converted_file_name}`', file=sys.stderr)
        sys.exit(GENERIC_ERROR_EXIT_CODE)

    return len(diagnostic_log)


def main():
    parsed_arguments = parse_command_line_arguments()
    document_file_name_arguments = parsed_arguments.document_file_name_arguments
    all_mode_enabled = parsed_arguments.all_mode_enabled
    verbose_mode_enabled = parsed_arguments.verbose_mode_enabled
    strict_mode_enabled = parsed_arguments.strict_mode_enabled

    warning_count = 0
    if all_mode_enabled:
        if len(document_file_name_arguments) > 0:
            print('error: option -a (or --all) cannot be used with positional argument', file=sys.stderr)
            sys.exit(COMMAND_LINE_ERROR_EXIT_CODE)

        document_file_names = [
            os.path.join(path, file_name)
            for path, _, file_names in os.walk(os.curdir)
            for file_name in file_names
            if is_legacy_file(file_name)
        ]
        for document_file_name in sorted(document_file_names):
            warning_count += generate_converted_file(document_file_name, verbose_mode_enabled,
                                                     uses_command_line_argument=False)

    else:
        for document_file_name_argument in document_file_name_arguments:
            warning_count += generate_converted_file(document_file_name_argument, verbose_mode_enabled,
                                                     uses_command_line_argument=True)

    if strict_mode_enabled and warning_count > 0:
        print(f'error: {warning_count} warning(s) emitted in strict mode', file=sys.stderr)
        sys.exit(WARNINGS_EXIT_CODE)


if __name__ == '__main__':
    main()
