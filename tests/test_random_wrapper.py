import pytest

from episim.random_wrapper import RandomWrapper


def test_gen_bool_zero_is_always_false():
    rng = RandomWrapper()
    assert not any(rng.gen_bool(0.0) for _ in range(200))


def test_gen_bool_one_is_always_true():
    rng = RandomWrapper()
    assert all(rng.gen_bool(1.0) for _ in range(200))


@pytest.mark.parametrize("probability", [-0.01, 1.01])
def test_gen_bool_rejects_invalid_probability(probability):
    with pytest.raises(ValueError):
        RandomWrapper().gen_bool(probability)


def test_same_seed_gives_same_sequence():
    first = RandomWrapper(seed=7)
    second = RandomWrapper(seed=7)
    assert [first.gen_bool(0.5) for _ in range(50)] == [second.gen_bool(0.5) for _ in range(50)]
    assert first.get().random() == second.get().random()


def test_get_returns_the_same_generator_each_time():
    rng = RandomWrapper(seed=3)
    reference = RandomWrapper(seed=3)
    reference_generator = reference.get()
    first_draw = reference_generator.random()
    second_draw = reference_generator.random()

    assert rng.get().random() == first_draw
    # A second call to get() continues the same generator state.
    assert rng.get().random() == second_draw