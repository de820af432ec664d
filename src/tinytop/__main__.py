from tinytop.cli import main

main()
