from sysincludes.cli import main

main()
