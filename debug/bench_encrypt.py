#!/usr/bin/env python3
"""Quick encrypt/decrypt benchmark - direct timing only"""
import time


TEXT = "Hello World Testing Performance Benchmark" * 100
PASSWORD = b"benchmark password"


def bench(iterations: int = 1000):
    import simpleenc

    start = time.perf_counter()
    for _ in range(iterations):
        envelope = simpleenc.encrypt(TEXT, PASSWORD)
    encrypt_time = time.perf_counter() - start

    start = time.perf_counter()
    for _ in range(iterations):
        plaintext = simpleenc.decrypt(envelope, PASSWORD)
    decrypt_time = time.perf_counter() - start
    return encrypt_time, decrypt_time, envelope, plaintext


def main():
    print("Benchmarking AES-256-CBC encrypt/decrypt (1000 iterations)...")
    print(f"Input size: {len(TEXT)} chars\n")

    enc_time, dec_time, envelope, plaintext = bench()
    print(f"  Encrypt: {enc_time:.3f}s ({enc_time:.2f} ms/op)")
    print(f"  Decrypt: {dec_time:.3f}s ({dec_time:.2f} ms/op)")
    print(f"  Envelope sample: {envelope.hex()[:60]}...")
    assert plaintext == TEXT.encode("utf-8")

    print("\nBenchmark complete")


if __name__ == '__main__':
    main()
