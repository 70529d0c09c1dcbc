from tscraft.cli import main

main()
