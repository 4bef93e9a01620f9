from university_records.identity.allocator import IdentityAllocator


def test_allocator_starts_after_seed():
    allocator = IdentityAllocator()

    assert allocator.current == 1000
    assert allocator.next() == 1001
    assert allocator.current == 1001


def test_allocator_is_strictly_increasing():
    allocator = IdentityAllocator(seed=5)

    issued = [allocator.next() for _ in range(50)]

    assert issued == list(range(6, 56))
    assert len(set(issued)) == len(issued)


def test_allocators_are_independent():
    a = IdentityAllocator()
    b = IdentityAllocator()
    a.next()
    a.next()

    assert b.next() == 1001
