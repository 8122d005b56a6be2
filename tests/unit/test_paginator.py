import pytest

from subverify.listing.paginator import paginate


class TestPaginate:
    def test_splits_into_full_pages_and_remainder(self) -> None:
        assert paginate(list(range(7)), 3) == [[0, 1, 2], [3, 4, 5], [6]]

    def test_exact_multiple(self) -> None:
        assert paginate(["a", "b", "c", "d"], 2) == [["a", "b"], ["c", "d"]]

    @pytest.mark.parametrize("page_size", [1, 3, 10])
    def test_empty_input_has_no_pages(self, page_size: int) -> None:
        assert paginate([], page_size) == []

    @pytest.mark.parametrize("length", [0, 1, 9, 10, 11, 25])
    @pytest.mark.parametrize("page_size", [1, 4, 10])
    def test_concatenated_pages_reproduce_input(self, length: int, page_size: int) -> None:
        items = [f"item-{i}" for i in range(length)]
        pages = paginate(items, page_size)
        assert [item for page in pages for item in page] == items
        assert all(len(page) == page_size for page in pages[:-1])

    @pytest.mark.parametrize("page_size", [0, -1])
    def test_rejects_non_positive_page_size(self, page_size: int) -> None:
        with pytest.raises(ValueError, match="page_size"):
            paginate([1, 2], page_size)
