from lcg import LinearCongruentialGenerator


def test_first_draws_match_reference_values():
    assert LinearCongruentialGenerator(0).next() == 16838
    assert LinearCongruentialGenerator(42).next() == 3151


def test_first_five_draws():
    for seed, expected in ((0, [16838, 5758, 10113, 17515, 31051]), (42, [3151, 1324, 15394, 20860, 8641])):
        rng = LinearCongruentialGenerator(seed)
        assert [rng.next() for _ in range(5)] == expected


def test_state_starts_one_past_the_seed():
    assert LinearCongruentialGenerator(0).state == 1
    assert LinearCongruentialGenerator(2 ** 64 - 1).state == 0


def test_same_seed_same_sequence():
    a = LinearCongruentialGenerator(987654321)
    b = LinearCongruentialGenerator(987654321)
    assert [a.next() for _ in range(200)] == [b.next() for _ in range(200)]


def test_different_seeds_diverge():
    a = LinearCongruentialGenerator(1)
    b = LinearCongruentialGenerator(2)
    assert [a.next() for _ in range(20)] != [b.next() for _ in range(20)]


def test_outputs_stay_in_range():
    rng = LinearCongruentialGenerator(2 ** 63 + 17)
    for _ in range(1000):
        assert 0 <= rng.next() < 32768


def test_state_stays_64_bit():
    rng = LinearCongruentialGenerator(2 ** 64 - 2)
    for _ in range(100):
        rng.next()
        assert 0 <= rng.state < 2 ** 64


def test_helpers_consume_one_draw_each():
    reference = LinearCongruentialGenerator(7)
    draws = [reference.next() for _ in range(3)]

    rng = LinearCongruentialGenerator(7)
    assert rng.next_below(5) == draws[0] % 5
    assert rng.one_in(3) == (draws[1] % 3 == 0)
    assert rng.sign() == (-1 if draws[2] % 2 == 0 else 1)
