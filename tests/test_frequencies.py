import io
import os
import tempfile
import unittest

from freqtext.data.frequencies import (
    BigramRecord,
    WordRecord,
    parse_bigram_line,
    parse_word_line,
    read_bigram_file,
    read_bigrams,
    read_word_file,
    read_words,
)


class TestBigramLines(unittest.TestCase):
    def test_valid_line(self):
        self.assertEqual(parse_bigram_line('ab\t12\n'), BigramRecord('a', 'b', 12))

    def test_space_is_a_character(self):
        self.assertEqual(parse_bigram_line(' a\t3'), BigramRecord(' ', 'a', 3))

    def test_extra_fields_ignored(self):
        self.assertEqual(parse_bigram_line('ab\t1\tcomment\r\n'), BigramRecord('a', 'b', 1))

    def test_malformed_lines(self):
        for line in ['', 'ab', 'abc\t4', 'a\t4', 'ab\tfour', 'ab\t1.5', 'ab\t-2', 'ab\t']:
            with self.subTest(line=line):
                self.assertIsNone(parse_bigram_line(line))

    def test_read_skips_malformed(self):
        stream = io.StringIO('ab\t1\nbroken\nbc\t2\n\ncd\tx\n')
        self.assertEqual(
            list(read_bigrams(stream)),
            [BigramRecord('a', 'b', 1), BigramRecord('b', 'c', 2)],
        )

    def test_read_file(self):
        fd, path = tempfile.mkstemp(suffix='.txt')
        with os.fdopen(fd, 'w', encoding='utf-8') as f:
            f.write('пр\t120\nро\t80\n')
        try:
            records = read_bigram_file(path)
        finally:
            os.remove(path)
        self.assertEqual(records, [BigramRecord('п', 'р', 120), BigramRecord('р', 'о', 80)])

    def test_read_file_with_byte_order_mark(self):
        fd, path = tempfile.mkstemp(suffix='.txt')
        with os.fdopen(fd, 'w', encoding='utf-8-sig') as f:
            f.write('ab\t5\ncd\t3\n')
        try:
            records = read_bigram_file(path)
        finally:
            os.remove(path)
        self.assertEqual(records, [BigramRecord('a', 'b', 5), BigramRecord('c', 'd', 3)])


class TestWordLines(unittest.TestCase):
    def test_valid_line(self):
        record = parse_word_line('1\tcat\tcat\tnoun\t10,5\t3\n')
        self.assertEqual(record, WordRecord('cat', ('10,5', '3')))

    def test_empty_fields_are_dropped(self):
        record = parse_word_line('1\t\tdog\tdog\tnoun\t\t7')
        self.assertEqual(record, WordRecord('dog', ('7',)))

    def test_too_few_fields(self):
        self.assertIsNone(parse_word_line('1\tcat\tcat\tnoun'))
        self.assertIsNone(parse_word_line(''))

    def test_read_file_with_byte_order_mark(self):
        fd, path = tempfile.mkstemp(suffix='.txt')
        with os.fdopen(fd, 'w', encoding='utf-8-sig') as f:
            f.write('1\tcat\tcat\tnoun\t4\n')
        try:
            records = read_word_file(path)
        finally:
            os.remove(path)
        self.assertEqual(records, [WordRecord('cat', ('4',))])

    def test_read_skips_malformed(self):
        lines = ['1\ta\ta\tx\t1', 'junk', '2\tb\tb\ty\t2\t3']
        self.assertEqual(
            list(read_words(lines)),
            [WordRecord('a', ('1',)), WordRecord('b', ('2', '3'))],
        )


if __name__ == '__main__':
    unittest.main()
