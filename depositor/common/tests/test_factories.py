from depositor.common.tests.factories import create_deposit_datum, faker


def test_seeded_faker():
    results = []
    for _ in range(2):
        faker.seed_instance(1)
        results.append((faker.eth_address(), faker.bytes32(), create_deposit_datum()))

    assert results[0] == results[1]
    assert len(results[0][0]) == 42
    assert len(results[0][1]) == 32
    assert len(bytes.fromhex(results[0][2].signature)) == 96
