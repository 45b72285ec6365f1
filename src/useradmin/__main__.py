from src.useradmin.cli import main

main()
