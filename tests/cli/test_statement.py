import pytest
from cli.statement import PrepareError, PrepareErrorType, StatementType, prepare_statement
from dblite.storage.constants import EMAIL_SIZE, USERNAME_SIZE
from dblite.storage.row import Row

def test_prepare_insert():
    statement = prepare_statement("insert 1 jasonh jasonh@example.test")
    assert statement.type == StatementType.INSERT
    assert statement.row_to_insert == Row(1, 'jasonh', 'jasonh@example.test')

def test_prepare_select():
    statement = prepare_statement("select")
    assert statement.type == StatementType.SELECT
    assert statement.row_to_insert is None

def test_prepare_max_length_strings():
    statement = prepare_statement(f"insert 2 {'a' * USERNAME_SIZE} {'b' * EMAIL_SIZE}")
    assert statement.row_to_insert.username == 'a' * USERNAME_SIZE

@pytest.mark.parametrize('user_input,error_type,message', [
    ("insert 1 jasonh", PrepareErrorType.SYNTAX_ERROR, "Syntax error. Could not parse statement."),
    ("insert abc jasonh a@b", PrepareErrorType.SYNTAX_ERROR, "Syntax error. Could not parse statement."),
    ("insertx 1 a b", PrepareErrorType.SYNTAX_ERROR, "Syntax error. Could not parse statement."),
    ("insert -1 jasonh a@b", PrepareErrorType.NEGATIVE_ID, "ID must be positive."),
    ("insert 4294967296 jasonh a@b", PrepareErrorType.ID_TOO_LARGE, "ID is too large."),
    (f"insert 1 {'a' * (USERNAME_SIZE + 1)} a@b", PrepareErrorType.STRING_TOO_LONG, "username is too long"),
    (f"insert 1 jasonh {'a' * (EMAIL_SIZE + 1)}", PrepareErrorType.STRING_TOO_LONG, "email is too long"),
    ("update 1", PrepareErrorType.UNRECOGNIZED_STATEMENT, "Unrecognized keyword at start of 'update 1'."),
])
def test_prepare_errors(user_input, error_type, message):
    with pytest.raises(PrepareError) as excinfo:
        prepare_statement(user_input)
    assert excinfo.value.error_type == error_type
    assert excinfo.value.message == message

def test_username_length_counts_bytes():
    # 17 个双字节字符 = 34 字节
    with pytest.raises(PrepareError) as excinfo:
        prepare_statement(f"insert 1 {'é' * 17} a@b")
    assert excinfo.value.error_type == PrepareErrorType.STRING_TOO_LONG
