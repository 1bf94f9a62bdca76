"""Array and integer problems."""

from __future__ import annotations

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


def two_sum(nums: list[int], target: int) -> list[int]:
    """Return indices of the first pair adding up to target, or an empty list."""
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        complement = target - value
        if complement in seen:
            return [seen[complement], index]
        seen[value] = index
    return []


def remove_element(nums: list[int], val: int) -> int:
    """Move the elements not equal to val to the front of nums and return their count."""
    kept = [value for value in nums if value != val]
    nums[: len(kept)] = kept
    return len(kept)


def max_sub_array(nums: list[int]) -> int:
    """Return the largest sum of a non-empty contiguous subarray."""
    if not nums:
        raise ValueError("nums must not be empty")
    best = current = nums[0]
    for value in nums[1:]:
        current = max(value, current + value)
        best = max(best, current)
    return best


def merge(nums1: list[int], m: int, nums2: list[int], n: int) -> None:
    """Merge the first n items of nums2 into nums1, whose first m items are sorted.

    nums1 must have room for m + n items; it is changed in place.
    """
    i, j, k = m - 1, n - 1, m + n - 1
    while k >= 0 and i >= 0 and j >= 0:
        if nums1[i] > nums2[j]:
            nums1[k] = nums1[i]
            i -= 1
        else:
            nums1[k] = nums2[j]
            j -= 1
        k -= 1
    if j >= 0:
        nums1[: j + 1] = nums2[: j + 1]


def find_median_sorted_arrays(nums1: list[int], nums2: list[int]) -> float:
    """Return the median of the union of two sorted lists."""
    if len(nums1) > len(nums2):
        nums1, nums2 = nums2, nums1
    n1, n2 = len(nums1), len(nums2)
    total = n1 + n2
    if total == 0:
        raise ValueError("at least one list must be non-empty")
    left = (total + 1) // 2
    low, high = 0, n1
    inf = float("inf")
    while low <= high:
        mid1 = (low + high) // 2
        mid2 = left - mid1
        l1 = nums1[mid1 - 1] if mid1 > 0 else -inf
        l2 = nums2[mid2 - 1] if mid2 > 0 else -inf
        r1 = nums1[mid1] if mid1 < n1 else inf
        r2 = nums2[mid2] if mid2 < n2 else inf
        if l1 <= r2 and l2 <= r1:
            if total % 2 == 1:
                return float(max(l1, l2))
            return (max(l1, l2) + min(r1, r2)) / 2.0
        if l1 > r2:
            high = mid1 - 1
        else:
            low = mid1 + 1
    raise ValueError("inputs must be sorted")


def divide(dividend: int, divisor: int) -> int:
    """Divide two 32-bit integers, truncating toward zero and clamping on overflow."""
    if divisor == 0:
        raise ZeroDivisionError("division by zero")
    if dividend == INT_MIN and divisor == -1:
        return INT_MAX
    if dividend == INT_MIN and divisor == 1:
        return INT_MIN
    negative = (dividend < 0) != (divisor < 0)
    remaining, step = abs(dividend), abs(divisor)
    result = 0
    while remaining >= step:
        chunk, multiple = step, 1
        while remaining >= chunk << 1:
            chunk <<= 1
            multiple <<= 1
        remaining -= chunk
        result += multiple
    return -result if negative else result