# Allows `python -m tyche`

from tyche.main import main

main()
