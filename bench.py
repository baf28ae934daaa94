import cProfile
import pstats

from lambdacodec import from_bruijn, from_number, reduce, to_number


def main():
    succ = from_bruijn("LLL(1 ((2 1) 0))")
    mul = from_bruijn("LLL(2 (1 0))")

    term = from_number(0)
    for i in range(30):
        term = reduce(succ(term))
        assert to_number(term) == i + 1
    reduce(mul(term)(term))


if __name__ == "__main__":
    with cProfile.Profile() as profile:
        main()
        print("bench done")
        results = pstats.Stats(profile)
        results.sort_stats(pstats.SortKey.TIME)
        results.dump_stats("results.profile")
