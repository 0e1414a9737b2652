import pytest
from dblite.storage.constants import EMAIL_SIZE, ROW_SIZE, USERNAME_SIZE
from dblite.storage.row import Row, RowSerializer

def test_round_trip():
    ser = RowSerializer()
    row = Row(1, 'jasonh', 'jasonh@example.test')
    data = ser.serialize(row)
    assert isinstance(data, bytes)
    assert len(data) == ROW_SIZE
    assert ser.deserialize(data) == row

def test_round_trip_max_length_fields():
    ser = RowSerializer()
    row = Row(0xFFFFFFFF, 'u' * USERNAME_SIZE, 'e' * EMAIL_SIZE)
    assert ser.deserialize(ser.serialize(row)) == row

def test_on_disk_layout_is_id_email_username():
    ser = RowSerializer()
    data = ser.serialize(Row(258, 'ab', 'c@d'))
    # id 大端序
    assert data[:4] == b'\x00\x00\x01\x02'
    assert data[4:4 + EMAIL_SIZE] == b'c@d' + b'\x00' * (EMAIL_SIZE - 3)
    assert data[4 + EMAIL_SIZE:] == b'ab' + b'\x00' * (USERNAME_SIZE - 2)

def test_oversized_fields_are_truncated():
    ser = RowSerializer()
    row = Row(7, 'a' * (USERNAME_SIZE + 8), 'b' * (EMAIL_SIZE + 45))
    decoded = ser.deserialize(ser.serialize(row))
    assert decoded.username == 'a' * USERNAME_SIZE
    assert decoded.email == 'b' * EMAIL_SIZE

def test_truncation_drops_split_multibyte_character():
    ser = RowSerializer()
    # 1 + 16*2 = 33 字节，最后一个 'é' 被截成半个字符
    row = Row(1, 'a' + 'é' * 16, 'x@y')
    decoded = ser.deserialize(ser.serialize(row))
    assert decoded.username == 'a' + 'é' * 15

def test_decode_stops_at_first_zero_byte():
    ser = RowSerializer()
    data = bytearray(ser.serialize(Row(3, 'abc', 'mail')))
    data[4 + EMAIL_SIZE + 5] = ord('z')
    assert ser.deserialize(bytes(data)).username == 'abc'

def test_serialize_into_and_deserialize_from_offset():
    ser = RowSerializer()
    buf = bytearray(1000)
    row = Row(42, 'bob', 'bob@example.test')
    ser.serialize_into(row, buf, ROW_SIZE)
    assert buf[:ROW_SIZE] == bytearray(ROW_SIZE)
    assert ser.deserialize_from(buf, ROW_SIZE) == row

@pytest.mark.parametrize('bad_id', [-1, 2 ** 32])
def test_id_out_of_range(bad_id):
    ser = RowSerializer()
    with pytest.raises(ValueError):
        ser.serialize(Row(bad_id, 'a', 'b'))

def test_row_str():
    assert str(Row(1, 'jasonh', 'jasonh@example.test')) == ' 1 | jasonh | jasonh@example.test'
