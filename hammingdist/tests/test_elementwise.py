from __future__ import generator_stop

from functools import partial
from string import ascii_lowercase

from hammingdist.elementwise import element_distance, element_distance_chunked, text_distance
from hammingdist.rand import randlist, randstr
from hammingdist.test import MyTestCase, parametrize, parametrize_product, random_arguments

randstr_10 = partial(randstr, 10, "abc")
randlist_10 = partial(randlist, 10, 3)


class ElementDistanceTest(MyTestCase):
    @parametrize(
        ("Cat", "Hat", 1),
        ("karolin", "kathrin", 3),
        ("", "", 0),
        (["a", "b"], ["c", "d"], 2),
        (("a", "b"), ("a", "b"), 0),
        ([1, 2, 3, 4], [1, 0, 3, 0], 2),
        ([None, 1.0], [None, 1], 0),
        (b"abc", b"abd", 1),
        (list("Cat"), list("Hat"), 1),
    )
    def test_element_distance(self, a, b, truth):
        result = element_distance(a, b)
        self.assertEqual(truth, result)

    @parametrize(
        ("Cat", "Cats", 3, 4, "strings"),
        ("", "a", 0, 1, "strings"),
        (["a"], ["c", "d"], 1, 2, "sequences"),
        (list("Cat"), list("Cats"), 3, 4, "sequences"),
        ((1, 2, 3), (1, 2), 3, 2, "sequences"),
    )
    def test_element_distance_lengthmismatch(self, a, b, len_a, len_b, kind):
        with self.assertLengthMismatch(len_a, len_b, kind):
            element_distance(a, b)

    def test_element_distance_message(self):
        with self.assertRaisesRegex(ValueError, "^Strings do not have equal length: 3 != 4$"):
            element_distance("Cat", "Cats")

    @random_arguments(100, randstr_10, randstr_10)
    def test_element_distance_properties(self, a, b):
        self.assertEqual(0, element_distance(a, a))
        self.assertEqual(element_distance(a, b), element_distance(b, a))
        self.assertLessEqual(element_distance(a, b), len(a))
        self.assertEqual(element_distance(a, b), element_distance(list(a), list(b)))

    @random_arguments(100, randlist_10, randlist_10)
    def test_element_distance_lists(self, a, b):
        truth = len([i for i in range(len(a)) if a[i] != b[i]])
        self.assertEqual(truth, element_distance(a, b))
        self.assertEqual(truth, element_distance(tuple(a), tuple(b)))


    def test_element_distance_nan(self):
        nan = float("nan")
        seq = [1.0, nan, "a"]

        self.assertEqual(0, element_distance([nan], [nan]))
        self.assertEqual(0, element_distance(seq, seq))
        self.assertEqual(0, element_distance(seq, tuple(seq)))
        self.assertEqual(1, element_distance([nan, 1.0], [nan, 2.0]))


class TextDistanceTest(MyTestCase):
    @parametrize(
        ("Cat", "Hat", 1),
        ("é", "e", 1),
        ("日本語", "日本人", 1),
        ("straße", "strasz", 2),
    )
    def test_text_distance(self, a, b, truth):
        result = text_distance(a, b)
        self.assertEqual(truth, result)

    def test_text_distance_code_points(self):
        # equal number of characters, different number of utf-8 bytes
        a, b = "é", "e"
        self.assertNotEqual(len(a.encode("utf-8")), len(b.encode("utf-8")))
        self.assertEqual(1, text_distance(a, b))

    def test_text_distance_lengthmismatch(self):
        with self.assertLengthMismatch(2, 1, "strings"):
            text_distance("ab", "é")

    @parametrize(
        (b"Cat", b"Hat"),
        (["C", "a", "t"], "Hat"),
        ("Cat", None),
    )
    def test_text_distance_typeerror(self, a, b):
        with self.assertRaises(TypeError):
            text_distance(a, b)


class ElementDistanceChunkedTest(MyTestCase):
    @parametrize_product(
        (1, 7, 100, 10000),
        (True, False),
    )
    def test_element_distance_chunked(self, chunksize, parallel):
        a = ascii_lowercase * 40
        b = "".join(reversed(a))
        truth = element_distance(a, b)
        result = element_distance_chunked(a, b, chunksize, parallel=parallel, workers=2)
        self.assertEqual(truth, result)

    def test_element_distance_chunked_lengthmismatch(self):
        with self.assertLengthMismatch(2, 3, "sequences"):
            element_distance_chunked([1, 2], [1, 2, 3])


if __name__ == "__main__":
    import unittest

    unittest.main()
