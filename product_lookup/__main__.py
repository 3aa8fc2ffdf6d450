from product_lookup.main import run

run()
