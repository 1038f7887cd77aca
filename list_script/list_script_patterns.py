# Collection of patterns used for parsing a list script file.
# Used by the method: ListScript.parse_and_add_operation(..)
# Used by the method: ListScript.is_comment_line(..)
class ListScriptPatterns:
    number_pattern = r'-?(([1-9][0-9]*)|0)'
    position_pattern = r'(([1-9][0-9]*)|0)'
    optional_line_comment_pattern = r'(?P<line_comment>((\/\/)|(\#)).*)?'
    line_end_pattern = r'[\s]*' + optional_line_comment_pattern + r'$'

    comment_line_pattern = r'^[\s]*' + optional_line_comment_pattern + r'$'

    init_operation_pattern = r'^init[\s]+(?P<init_value>' + number_pattern + r')' + line_end_pattern

    # `append 20 30 40` appends each of the values. The `regex` module keeps all of the
    # captures of a repeated named group, see `capturesdict()`.
    append_operation_pattern = r'^append([\s]+(?P<append_value>' + number_pattern + r'))+' + line_end_pattern

    insert_operation_pattern = r'^insert[\s]+(?P<insert_value>' + number_pattern + r')' + \
                               r'[\s]+at[\s]+(?P<insert_position>' + position_pattern + r')' + line_end_pattern

    remove_operation_pattern = r'^remove[\s]+(?P<remove_value>' + number_pattern + r')' + line_end_pattern

    print_operation_pattern = r'^print' + line_end_pattern
