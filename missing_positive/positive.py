'''
Given a list of integers, return the smallest integer greater than zero that does not appear in the list.

Example 1: [2000, 0, 1, 1, 50, 1000]
Output: 2

Example 2: [-5, -3, 0]
Output: 1
'''
from typing import Iterable
import argparse
import re

sample = [2000, 0, 1, 1, 50, 1000]

verbose = False


def check_numbers(nums):
    if nums is None:
        raise RuntimeError("No numbers supplied")


def first_missing_positive(nums: Iterable[int]) -> int:
    check_numbers(nums)

    result = 1

    # last positive value we accepted, 0 means none yet
    last = 0

    # sorted copy, the caller's list keeps its order
    for num in sorted(nums):
        if num > result or num == last or num <= 0:
            if verbose:
                print(f"skip {num}")
            continue

        last = num
        result += 1

        if verbose:
            print(f"take {num}, next candidate {result}")

    return result


def get_min(nums: Iterable[int], d: int) -> int:
    # NOTE m starts at 0 so only negative values above d ever replace it.
    # kept exactly like this on purpose, don't "fix" it without asking
    check_numbers(nums)

    m = 0
    for num in nums:
        if num < m and num > d:
            m = num

    return m


def smallest_missing_by_set(nums: Iterable[int]) -> int:
    check_numbers(nums)

    # one pass only, nums may be a generator
    present = set(nums)

    # the answer is 1 or sits just past some positive value that is present
    candidates = {val + 1 for val in present if val > 0}
    candidates.add(1)

    return min(candidates - present)


def parse_numbers(text: str) -> list:
    numbers = []

    lines = text.split("\n")
    for n, line in enumerate(lines):
        # commas and spaces are both fine as separators
        for token in re.split(r"[,\s]+", line.strip()):
            if not token:
                continue
            try:
                numbers.append(int(token))
            except ValueError:
                raise RuntimeError(f"'{token}' on line {n + 1} is not an integer")

    return numbers


def load_file(filename: str) -> str:
    try:
        with open(filename) as f:
            return f.read()
    except FileNotFoundError:
        raise RuntimeError(f"{filename} does not exist")


def run(numbers, filename=None, threshold=None):

    nums = parse_numbers(" ".join(numbers))
    if filename:
        nums.extend(parse_numbers(load_file(filename)))

    if not numbers and not filename:
        nums = sample.copy()

    print(f"result={first_missing_positive(nums)}")

    if threshold is not None:
        print(f"min={get_min(nums, threshold)}")


def main(argv=None):
    # command line format:
    # positive.py 3 4 -1 1
    # positive.py -f numbers.txt -d -8
    parser = argparse.ArgumentParser()
    parser.add_argument('numbers', nargs='*', help='integers to search, sample list if none given')
    parser.add_argument('-f', help='file of integers, comma or whitespace separated')
    parser.add_argument('-d', help='threshold for get_min', type=int)
    parser.add_argument('-v', help='show each step of the scan', action='store_true')
    args = parser.parse_args(argv)

    global verbose
    verbose = args.v

    try:
        run(args.numbers, args.f, args.d)
    except RuntimeError as e:
        print(str(e))
        return
    finally:
        verbose = False


if __name__ == "__main__":
    main()
