"""
# AsciiDoc-Compat: constants.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Constants.
"""

GENERIC_ERROR_EXIT_CODE = 1
COMMAND_LINE_ERROR_EXIT_CODE = 2
WARNINGS_EXIT_CODE = 3
VERBOSE_MODE_DIVIDER_SYMBOL_COUNT = 48

LEGACY_FILE_EXTENSION = '.asciidoc'
CONVERTED_FILE_EXTENSION = '.adoc'

BLOCK_DELIMITER = '--'
INCLUDE_TAGGED_SCHEME = 'elastic-include-tagged'
LEGACY_MACRO_NAMES = 'added|beta|coming|deprecated|experimental'

DIAGNOSTIC_SEVERITY_WARNING = 'warning'
DELIMITER_MISMATCH_CODE = 'delimiter-mismatch'
INVALID_INCLUDE_CODE = 'invalid-include'
UNTERMINATED_BLOCK_CODE = 'unterminated-block'
UNTERMINATED_FENCE_CODE = 'unterminated-fence'

# All patterns are compiled with `flags=re.ASCII | re.VERBOSE` and matched against a single line,
# except attribute entries, whose names may start with any Unicode word character.
ATTRIBUTE_ENTRY_PATTERN = r'''
    [:] (?P<name> [!]? [\w] [^:]* ) [:]
    (?: [ \t]+ (?P<value> .* ) )?
'''
INCLUDE_TAGGED_PATTERN = r'''
    include-tagged [:]{2}
    (?P<target> [^\[] [^\[]* )
    \[ (?P<attributes> .+ )? \]
'''
INCLUDE_TARGET_PATTERN = r'''
    [^\s\]]+
'''
SOURCE_WITH_SUBS_PATTERN = r'''
    \[ "source" , [ ]? "[^"]+" , [ ]? subs="(?P<subs> .+ )" \]
'''
CODE_BLOCK_DELIMITER_PATTERN = r'''
    -{4,}
'''
LEGACY_BLOCK_MACRO_PATTERN = rf'''
    ^ [\s]* (?P<name> {LEGACY_MACRO_NAMES} ) \[ (?P<argument> [^\]]* ) \] [\s]* $
'''
LEGACY_BLOCK_MACRO_SUBSTITUTE = r'\g<name>::[\g<argument>]'
LEGACY_INLINE_MACRO_PATTERN = rf'''
    (?<! [\w:/.-] )
    (?P<name> {LEGACY_MACRO_NAMES} ) \[ (?P<argument> [^\]]* ) \]
'''
LEGACY_INLINE_MACRO_SUBSTITUTE = r'\g<name>:[\g<argument>]'
SNIPPET_PATTERN = r'''
    ^ [/]{2} [\s]* (?P<keyword> AUTOSENSE | KIBANA | CONSOLE | SENSE: [^\n<]+ ) $
'''
SNIPPET_SUBSTITUTE = r'lang_override::[\g<keyword>]'
